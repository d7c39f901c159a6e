"""Data models for accounts, journal entries and reports."""

from .accounts import (
    AccountHead,
    AccountType,
    CostCategory,
)
from .journal import JournalEntry
from .reports import (
    BalanceSheet,
    CostSheet,
    FinancialReportData,
    LedgerBalance,
    ProfitAndLoss,
    TradingAccount,
)

__all__ = [
    "AccountHead",
    "AccountType",
    "CostCategory",
    "JournalEntry",
    "LedgerBalance",
    "TradingAccount",
    "ProfitAndLoss",
    "BalanceSheet",
    "CostSheet",
    "FinancialReportData",
]
