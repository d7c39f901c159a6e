"""Ledger aggregation from journal entries."""

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from finmatrix.core.chart import ChartResolver
from finmatrix.models import JournalEntry, LedgerBalance

logger = logging.getLogger(__name__)


class LedgerAggregator:
    """
    Reduces journal entries to one LedgerBalance per account.

    Accounts come out in the order they are first referenced (debit side of
    an entry before its credit side). Only addition is used, so the balances
    do not depend on entry order.
    """

    def __init__(self, resolver: Optional[ChartResolver] = None):
        self.resolver = resolver or ChartResolver()

    def generate_ledgers(self, entries: Iterable[JournalEntry]) -> List[LedgerBalance]:
        """
        Aggregate entries into ledger balances.

        Args:
            entries: Tenant-filtered journal entries; not modified

        Returns:
            List of LedgerBalance in first-seen account order
        """
        slots: Dict[str, int] = {}
        names: List[str] = []
        totals: List[List[Decimal]] = []

        def slot_for(account_name: str) -> int:
            index = slots.get(account_name)
            if index is None:
                index = len(names)
                slots[account_name] = index
                names.append(account_name)
                totals.append([Decimal("0"), Decimal("0")])
            return index

        count = 0
        for entry in entries:
            totals[slot_for(entry.debit_account)][0] += entry.amount
            totals[slot_for(entry.credit_account)][1] += entry.amount
            count += 1

        ledgers = [
            LedgerBalance(
                account_name=name,
                total_debit=debit,
                total_credit=credit,
                closing_balance=debit - credit,
                type=self.resolver.resolve(name).type,
            )
            for name, (debit, credit) in zip(names, totals)
        ]
        logger.debug("Aggregated %d entries into %d ledgers", count, len(ledgers))
        return ledgers

    @staticmethod
    def trial_balance(ledgers: Iterable[LedgerBalance]) -> Dict[str, object]:
        """
        Check that debits equal credits across a complete ledger set.

        Returns:
            Dictionary with debit_total, credit_total, balance_diff, is_balanced
        """
        debit_total = Decimal("0")
        credit_total = Decimal("0")
        closing_total = Decimal("0")
        for ledger in ledgers:
            debit_total += ledger.total_debit
            credit_total += ledger.total_credit
            closing_total += ledger.closing_balance

        is_balanced = closing_total == 0 and debit_total == credit_total
        if not is_balanced:
            logger.warning(
                "Trial balance does not agree: debits=%s credits=%s", debit_total, credit_total
            )
        return {
            "debit_total": debit_total,
            "credit_total": credit_total,
            "balance_diff": debit_total - credit_total,
            "is_balanced": is_balanced,
        }
