"""Chart of accounts lookup."""

import logging
from typing import Dict, Iterable, Optional, Tuple

from finmatrix.models import AccountHead, AccountType, CostCategory

logger = logging.getLogger(__name__)

FALLBACK_ACCOUNT_CODE = "999"


def _head(code, name, account_type, cost_category=CostCategory.NOT_APPLICABLE, is_direct=False):
    return AccountHead(
        code=code,
        name=name,
        type=account_type,
        cost_category=cost_category,
        is_direct=is_direct,
    )


DEFAULT_CHART_OF_ACCOUNTS: Tuple[AccountHead, ...] = (
    _head("101", "Cash", AccountType.ASSET),
    _head("102", "Bank", AccountType.ASSET),
    _head("103", "Accounts Receivable", AccountType.ASSET),
    _head("104", "Machinery", AccountType.ASSET),
    _head("201", "Accounts Payable", AccountType.LIABILITY),
    _head("202", "Bank Loan", AccountType.LIABILITY),
    _head("301", "Share Capital", AccountType.EQUITY),
    _head("302", "Retained Earnings", AccountType.EQUITY),
    _head("401", "Sales", AccountType.REVENUE, is_direct=True),
    _head("402", "Service Income", AccountType.REVENUE, is_direct=True),
    _head("501", "Raw Material Purchase", AccountType.EXPENSE, CostCategory.DIRECT_MATERIAL, True),
    _head("502", "Factory Wages", AccountType.EXPENSE, CostCategory.DIRECT_LABOR, True),
    _head("503", "Factory Electricity", AccountType.EXPENSE, CostCategory.FACTORY_OVERHEAD, True),
    _head("504", "Office Rent", AccountType.EXPENSE, CostCategory.ADMIN_OVERHEAD),
    _head("505", "Salaries (Admin)", AccountType.EXPENSE, CostCategory.ADMIN_OVERHEAD),
    _head("506", "Marketing", AccountType.EXPENSE, CostCategory.SELLING_OVERHEAD),
)


class ChartResolver:
    """
    Resolves account names against a static chart of accounts.

    Names missing from the chart resolve to an indirect expense with no cost
    category, so every posted account can still be classified.
    """

    def __init__(self, chart: Optional[Iterable[AccountHead]] = None):
        """
        Build the name index once.

        Args:
            chart: Account heads in chart order; defaults to DEFAULT_CHART_OF_ACCOUNTS
        """
        heads = tuple(DEFAULT_CHART_OF_ACCOUNTS if chart is None else chart)
        self._by_name: Dict[str, AccountHead] = {}
        for head in heads:
            # first definition of a name wins
            self._by_name.setdefault(head.name, head)
        self.accounts: Tuple[AccountHead, ...] = heads

    def __contains__(self, account_name: str) -> bool:
        return account_name in self._by_name

    def resolve(self, account_name: str) -> AccountHead:
        """
        Get classification metadata for an account name.

        Args:
            account_name: Exact account name as posted

        Returns:
            The chart's AccountHead, or the fallback indirect expense head
        """
        head = self._by_name.get(account_name)
        if head is not None:
            return head

        logger.debug("Account %r not in chart; classifying as indirect expense", account_name)
        return AccountHead(
            code=FALLBACK_ACCOUNT_CODE,
            name=account_name,
            type=AccountType.EXPENSE,
            cost_category=CostCategory.NOT_APPLICABLE,
            is_direct=False,
        )
