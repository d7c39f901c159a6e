"""Presentation tables built from a FinancialReportData bundle."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional

import pandas as pd

from finmatrix.core.statements import sum_closing
from finmatrix.exceptions import UnknownStatementError
from finmatrix.models import CostCategory, FinancialReportData, LedgerBalance

STATEMENT_CODES = ["TR", "PL", "BS", "CS", "GL"]

TABLE_COLUMNS = [
    "stmt",
    "line",
    "section",
    "label",
    "value",
    "display_value",
    "formatted_value",
    "is_total",
]
LEDGER_COLUMNS = TABLE_COLUMNS + ["type", "total_debit", "total_credit"]

TOTAL_SECTION = "Total"


def format_amount(value: Optional[Decimal], decimal_places: int = 0) -> Optional[str]:
    """Format an amount with thousands separators and parentheses for negatives."""
    if value is None:
        return None
    value = Decimal(value)
    if not value.is_finite():
        return str(value)

    quantum = Decimal(1).scaleb(-decimal_places)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    text = f"{abs(rounded):,.{decimal_places}f}"
    return f"({text})" if rounded < 0 else text


def balance_sheet_closure(report: FinancialReportData) -> Dict[str, object]:
    """
    Close the accounting equation for presentation.

    Net profit for the period is added to the capital side, since the report
    bundle leaves equity without it.

    Returns:
        Dictionary with total_assets, total_equity, total_liabilities,
        net_profit, total_liabilities_and_equity, difference, is_balanced
    """
    sheet = report.balance_sheet
    total_equity = abs(sum_closing(sheet.equity))
    total_liabilities = abs(sum_closing(sheet.liabilities))
    net_profit = report.pnl.net_profit
    closed_total = total_equity + total_liabilities + net_profit
    difference = sheet.total_assets - closed_total
    return {
        "total_assets": sheet.total_assets,
        "total_equity": total_equity,
        "total_liabilities": total_liabilities,
        "net_profit": net_profit,
        "total_liabilities_and_equity": closed_total,
        "difference": difference,
        "is_balanced": difference == 0,
    }


class StatementTableBuilder:
    """
    Turns a report bundle into row-per-line DataFrames for display and export.

    ``value`` keeps the raw debit-positive number, ``display_value`` is what
    a reader sees (credit balances shown positive, deductions negative).
    """

    COST_SHEET_STAGES = [
        (
            [CostCategory.DIRECT_MATERIAL, CostCategory.DIRECT_LABOR, CostCategory.DIRECT_EXPENSE],
            "PRIME COST",
            "prime_cost",
        ),
        ([CostCategory.FACTORY_OVERHEAD], "WORKS COST", "works_cost"),
        ([CostCategory.ADMIN_OVERHEAD], "COST OF PRODUCTION", "cost_of_production"),
        ([CostCategory.SELLING_OVERHEAD], "COST OF SALES", "cost_of_sales"),
    ]

    def __init__(self, report: FinancialReportData, decimal_places: int = 0):
        self.report = report
        self.decimal_places = decimal_places
        self._builders = {
            "TR": self._trading_rows,
            "PL": self._pnl_rows,
            "BS": self._balance_sheet_rows,
            "CS": self._cost_sheet_rows,
            "GL": self._ledger_rows,
        }

    def _row(self, section, label, value, display_value, is_total=False) -> Dict[str, object]:
        return {
            "section": section,
            "label": label,
            "value": value,
            "display_value": display_value,
            "formatted_value": format_amount(display_value, self.decimal_places),
            "is_total": is_total,
        }

    def _ledger_lines(self, ledgers: Iterable[LedgerBalance], section, prefix="", sign=1, absolute=False):
        rows = []
        for ledger in ledgers:
            shown = abs(ledger.closing_balance) if absolute else sign * ledger.closing_balance
            rows.append(self._row(section, f"{prefix}{ledger.account_name}", ledger.closing_balance, shown))
        return rows

    def _trading_rows(self) -> List[Dict[str, object]]:
        trading = self.report.trading
        rows = self._ledger_lines(trading.revenue, "Revenue", absolute=True)
        rows += self._ledger_lines(trading.cogs, "COGS", prefix="Less: ", sign=-1)
        rows.append(
            self._row(TOTAL_SECTION, "Gross Profit c/d", trading.gross_profit, trading.gross_profit, True)
        )
        return rows

    def _pnl_rows(self) -> List[Dict[str, object]]:
        gross_profit = self.report.trading.gross_profit
        pnl = self.report.pnl
        rows = [self._row("Gross Profit", "Gross Profit b/d", gross_profit, gross_profit)]
        rows += self._ledger_lines(pnl.income, "Income", prefix="Add: ", absolute=True)
        rows += self._ledger_lines(pnl.expenses, "Expenses", prefix="Less: ", sign=-1)
        rows.append(
            self._row(TOTAL_SECTION, "Net Profit / (Loss)", pnl.net_profit, pnl.net_profit, True)
        )
        return rows

    def _balance_sheet_rows(self) -> List[Dict[str, object]]:
        sheet = self.report.balance_sheet
        closure = balance_sheet_closure(self.report)
        net_profit = closure["net_profit"]
        closed_total = closure["total_liabilities_and_equity"]

        rows = self._ledger_lines(sheet.equity, "Capital Account", absolute=True)
        rows.append(self._row("Capital Account", "Add: Net Profit", net_profit, net_profit))
        rows += self._ledger_lines(sheet.liabilities, "Current Liabilities", absolute=True)
        rows.append(self._row(TOTAL_SECTION, "Total Liabilities", closed_total, closed_total, True))
        rows += self._ledger_lines(sheet.assets, "Assets")
        rows.append(
            self._row(TOTAL_SECTION, "Total Assets", sheet.total_assets, sheet.total_assets, True)
        )
        return rows

    def _cost_sheet_rows(self) -> List[Dict[str, object]]:
        cost_sheet = self.report.cost_sheet
        rows = []
        for categories, label, attr in self.COST_SHEET_STAGES:
            for category in categories:
                rows += self._ledger_lines(cost_sheet.details.get(category, []), category.value)
            total = getattr(cost_sheet, attr)
            rows.append(self._row(TOTAL_SECTION, label, total, total, True))
        return rows

    def _ledger_rows(self) -> List[Dict[str, object]]:
        rows = []
        for ledger in self.report.ledgers:
            closing = ledger.closing_balance
            row = self._row(ledger.type.value, ledger.account_name, closing, abs(closing))
            side = "Cr" if closing.is_finite() and closing < 0 else "Dr"
            row["formatted_value"] = f"{row['formatted_value']} {side}"
            row.update(
                {
                    "type": ledger.type.value,
                    "total_debit": ledger.total_debit,
                    "total_credit": ledger.total_credit,
                }
            )
            rows.append(row)
        return rows

    def build_table(self, stmt_code: str) -> pd.DataFrame:
        """
        Build one statement table.

        Args:
            stmt_code: One of STATEMENT_CODES ('TR', 'PL', 'BS', 'CS', 'GL')

        Returns:
            DataFrame with one row per printed line, numbered from 1
        """
        code = stmt_code.upper()
        builder = self._builders.get(code)
        if builder is None:
            raise UnknownStatementError(
                f"Unknown statement code {stmt_code!r}; expected one of {STATEMENT_CODES}"
            )

        columns = LEDGER_COLUMNS if code == "GL" else TABLE_COLUMNS
        rows = builder()
        if not rows:
            return pd.DataFrame(columns=columns)

        for line, row in enumerate(rows, start=1):
            row["stmt"] = code
            row["line"] = line
        return pd.DataFrame(rows, columns=columns)

    def build_all_tables(self, statement_codes: Optional[List[str]] = None) -> Dict[str, pd.DataFrame]:
        codes = statement_codes or STATEMENT_CODES
        return {code: self.build_table(code) for code in codes}
