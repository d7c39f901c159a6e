"""Classification of ledger balances into financial statements."""

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from finmatrix.core.chart import ChartResolver
from finmatrix.models import (
    AccountType,
    BalanceSheet,
    LedgerBalance,
    ProfitAndLoss,
    TradingAccount,
)

logger = logging.getLogger(__name__)

TRADING_REVENUE = "trading.revenue"
TRADING_COGS = "trading.cogs"
PNL_INCOME = "pnl.income"
PNL_EXPENSES = "pnl.expenses"
BS_ASSETS = "balance_sheet.assets"
BS_LIABILITIES = "balance_sheet.liabilities"
BS_EQUITY = "balance_sheet.equity"

# (type, is_direct) -> bucket; balance sheet types ignore the flag
STATEMENT_ROUTES: Dict[Tuple[AccountType, bool], str] = {
    (AccountType.REVENUE, True): TRADING_REVENUE,
    (AccountType.REVENUE, False): PNL_INCOME,
    (AccountType.EXPENSE, True): TRADING_COGS,
    (AccountType.EXPENSE, False): PNL_EXPENSES,
    (AccountType.ASSET, True): BS_ASSETS,
    (AccountType.ASSET, False): BS_ASSETS,
    (AccountType.LIABILITY, True): BS_LIABILITIES,
    (AccountType.LIABILITY, False): BS_LIABILITIES,
    (AccountType.EQUITY, True): BS_EQUITY,
    (AccountType.EQUITY, False): BS_EQUITY,
}


def sum_closing(ledgers: Iterable[LedgerBalance]) -> Decimal:
    """Raw (debit-positive) sum of closing balances."""
    return sum((ledger.closing_balance for ledger in ledgers), Decimal("0"))


class StatementClassifier:
    """
    Partitions ledger balances into trading, P&L and balance sheet buckets.

    Totals are taken from the aggregated closing balances. Credit-natured
    totals (revenue, indirect income) are reported as absolute values.
    """

    def __init__(self, resolver: Optional[ChartResolver] = None):
        self.resolver = resolver or ChartResolver()

    def route(self, ledger: LedgerBalance) -> str:
        """Bucket name for one ledger."""
        head = self.resolver.resolve(ledger.account_name)
        return STATEMENT_ROUTES[(head.type, head.is_direct)]

    def classify(
        self, ledgers: Iterable[LedgerBalance]
    ) -> Tuple[TradingAccount, ProfitAndLoss, BalanceSheet]:
        """
        Build the trading account, P&L account and balance sheet.

        Args:
            ledgers: Ledger balances from LedgerAggregator

        Returns:
            Tuple of (TradingAccount, ProfitAndLoss, BalanceSheet)
        """
        buckets: Dict[str, List[LedgerBalance]] = {
            bucket: [] for bucket in set(STATEMENT_ROUTES.values())
        }
        for ledger in ledgers:
            buckets[self.route(ledger)].append(ledger)

        total_revenue = abs(sum_closing(buckets[TRADING_REVENUE]))
        total_cogs = sum_closing(buckets[TRADING_COGS])
        gross_profit = total_revenue - total_cogs

        total_indirect_income = abs(sum_closing(buckets[PNL_INCOME]))
        total_indirect_expense = sum_closing(buckets[PNL_EXPENSES])
        net_profit = gross_profit + total_indirect_income - total_indirect_expense

        trading = TradingAccount(
            revenue=buckets[TRADING_REVENUE],
            cogs=buckets[TRADING_COGS],
            total_revenue=total_revenue,
            total_cogs=total_cogs,
            gross_profit=gross_profit,
        )
        pnl = ProfitAndLoss(
            income=buckets[PNL_INCOME],
            expenses=buckets[PNL_EXPENSES],
            total_indirect_income=total_indirect_income,
            total_indirect_expense=total_indirect_expense,
            net_profit=net_profit,
        )
        balance_sheet = BalanceSheet(
            assets=buckets[BS_ASSETS],
            liabilities=buckets[BS_LIABILITIES],
            equity=buckets[BS_EQUITY],
            total_assets=sum_closing(buckets[BS_ASSETS]),
        )
        logger.debug(
            "Classified ledgers: gross_profit=%s net_profit=%s total_assets=%s",
            gross_profit,
            net_profit,
            balance_sheet.total_assets,
        )
        return trading, pnl, balance_sheet
