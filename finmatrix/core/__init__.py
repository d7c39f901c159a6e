"""Core engine functionality for turning journal entries into reports."""

from .chart import ChartResolver, DEFAULT_CHART_OF_ACCOUNTS
from .cost_sheet import CostSheetBuilder
from .engine import FinancialReportEngine
from .ledger import LedgerAggregator
from .statements import StatementClassifier
from .tables import StatementTableBuilder, balance_sheet_closure
from .tenancy import EntryRepository, User, UserDirectory, UserRole

__all__ = [
    "ChartResolver",
    "DEFAULT_CHART_OF_ACCOUNTS",
    "LedgerAggregator",
    "StatementClassifier",
    "CostSheetBuilder",
    "FinancialReportEngine",
    "StatementTableBuilder",
    "balance_sheet_closure",
    "EntryRepository",
    "User",
    "UserDirectory",
    "UserRole",
]
