"""Main engine for generating financial reports from journal entries."""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from finmatrix.core.chart import ChartResolver
from finmatrix.core.cost_sheet import CostSheetBuilder
from finmatrix.core.ledger import LedgerAggregator
from finmatrix.core.statements import StatementClassifier
from finmatrix.core.tables import StatementTableBuilder, balance_sheet_closure
from finmatrix.core.tenancy import EntryRepository, User, resolve_visible_tenant
from finmatrix.models import AccountHead, FinancialReportData, JournalEntry, LedgerBalance

logger = logging.getLogger(__name__)


class FinancialReportEngine:
    """
    Wires the ledger aggregator, statement classifier and cost sheet builder
    into one pipeline: journal entries -> ledger balances -> report bundle.

    The engine keeps no state between calls; every method is a function of
    its arguments and the chart of accounts given at construction.
    """

    def __init__(self, chart: Optional[Iterable[AccountHead]] = None, decimal_places: int = 0):
        """
        Initialize the engine with a chart of accounts.

        Args:
            chart: Account heads; defaults to the built-in chart of accounts
            decimal_places: Precision used when formatting table values
        """
        self.resolver = ChartResolver(chart)
        self.aggregator = LedgerAggregator(self.resolver)
        self.classifier = StatementClassifier(self.resolver)
        self.cost_sheet_builder = CostSheetBuilder(self.resolver)
        self.decimal_places = decimal_places

    def generate_ledgers(self, entries: Iterable[JournalEntry]) -> List[LedgerBalance]:
        """
        Aggregate journal entries into ledger balances.

        Args:
            entries: Tenant-filtered journal entries

        Returns:
            One LedgerBalance per account, in first-seen order
        """
        return self.aggregator.generate_ledgers(entries)

    def generate_statements(self, ledgers: Iterable[LedgerBalance]) -> FinancialReportData:
        """
        Classify ledger balances into statements and the cost sheet.

        Args:
            ledgers: Output of generate_ledgers

        Returns:
            FinancialReportData bundle
        """
        ledgers = list(ledgers)
        trading, pnl, balance_sheet = self.classifier.classify(ledgers)
        cost_sheet = self.cost_sheet_builder.build(ledgers)
        return FinancialReportData(
            ledgers=ledgers,
            trading=trading,
            pnl=pnl,
            balance_sheet=balance_sheet,
            cost_sheet=cost_sheet,
        )

    def generate_report(self, entries: Iterable[JournalEntry]) -> FinancialReportData:
        """
        Run the full pipeline on one entry set.

        Args:
            entries: Tenant-filtered journal entries

        Returns:
            FinancialReportData bundle
        """
        entries = list(entries)
        report = self.generate_statements(self.generate_ledgers(entries))
        logger.info(
            "Generated report from %d entries (%d ledgers): net_profit=%s",
            len(entries),
            len(report.ledgers),
            report.pnl.net_profit,
        )
        return report

    def generate_tenant_report(
        self,
        repository: EntryRepository,
        user: User,
        requested_tenant_id: Optional[str] = None,
    ) -> FinancialReportData:
        """
        Filter the shared entry log to the tenant a user may see, then report.

        Args:
            repository: Entry log holding every tenant's entries
            user: Viewing user
            requested_tenant_id: Tenant chosen in the view (CA users)

        Returns:
            FinancialReportData for the visible tenant
        """
        tenant_id = resolve_visible_tenant(user, requested_tenant_id)
        return self.generate_report(repository.entries_for(tenant_id))

    def validate_ledgers(self, ledgers: Iterable[LedgerBalance]) -> Dict[str, object]:
        """
        Trial balance check over a complete ledger set.

        Returns:
            Dictionary with debit_total, credit_total, balance_diff, is_balanced
        """
        return self.aggregator.trial_balance(ledgers)

    def validate_report(self, report: FinancialReportData) -> Dict[str, object]:
        """
        Run trial balance and balance sheet closure checks on a report.

        Returns:
            Dictionary with trial_balance, balance_sheet, status ('pass'/'fail')
        """
        trial_balance = self.validate_ledgers(report.ledgers)
        closure = balance_sheet_closure(report)
        passed = bool(trial_balance["is_balanced"]) and bool(closure["is_balanced"])
        return {
            "trial_balance": trial_balance,
            "balance_sheet": closure,
            "status": "pass" if passed else "fail",
        }

    def build_statement_table(self, report: FinancialReportData, stmt_code: str) -> pd.DataFrame:
        """
        Build one presentation table ('TR', 'PL', 'BS', 'CS' or 'GL').
        """
        builder = StatementTableBuilder(report, decimal_places=self.decimal_places)
        return builder.build_table(stmt_code)

    def build_statement_tables(
        self, report: FinancialReportData, statement_codes: Optional[List[str]] = None
    ) -> Dict[str, pd.DataFrame]:
        builder = StatementTableBuilder(report, decimal_places=self.decimal_places)
        return builder.build_all_tables(statement_codes)

    def export_report_csv(
        self,
        report: FinancialReportData,
        out_dir: Path,
        company_name: str,
        statement_codes: Optional[List[str]] = None,
    ) -> List[Path]:
        """
        Write one CSV per statement table.

        Args:
            report: Report bundle to export
            out_dir: Directory for the CSV files (created if missing)
            company_name: Used as the file name prefix
            statement_codes: Optional subset of statement codes

        Returns:
            Paths of the written files
        """
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        prefix = re.sub(r"[^A-Za-z0-9]+", "_", company_name).strip("_") or "report"

        written = []
        for code, table in self.build_statement_tables(report, statement_codes).items():
            path = out_dir / f"{prefix}_{code}.csv"
            table.to_csv(path, index=False)
            written.append(path)
        logger.info("Exported %d statement tables to %s", len(written), out_dir)
        return written
