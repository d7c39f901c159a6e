"""Manufacturing cost sheet."""

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from finmatrix.core.chart import ChartResolver
from finmatrix.core.statements import sum_closing
from finmatrix.models import CostCategory, CostSheet, LedgerBalance

logger = logging.getLogger(__name__)

PRIME_COST_CATEGORIES = (
    CostCategory.DIRECT_MATERIAL,
    CostCategory.DIRECT_LABOR,
    CostCategory.DIRECT_EXPENSE,
)


class CostSheetBuilder:
    """
    Groups ledgers by cost category and computes the cost waterfall.

    An account can sit in a statement bucket and a cost bucket at the same
    time. Category sums use raw closing balances; negative sums are kept.
    """

    def __init__(self, resolver: Optional[ChartResolver] = None):
        self.resolver = resolver or ChartResolver()

    def build(self, ledgers: Iterable[LedgerBalance]) -> CostSheet:
        details: Dict[CostCategory, List[LedgerBalance]] = {
            category: []
            for category in CostCategory
            if category is not CostCategory.NOT_APPLICABLE
        }
        for ledger in ledgers:
            category = self.resolver.resolve(ledger.account_name).cost_category
            if category is not CostCategory.NOT_APPLICABLE:
                details[category].append(ledger)

        prime_cost = sum(
            (sum_closing(details[category]) for category in PRIME_COST_CATEGORIES),
            Decimal("0"),
        )
        works_cost = prime_cost + sum_closing(details[CostCategory.FACTORY_OVERHEAD])
        cost_of_production = works_cost + sum_closing(details[CostCategory.ADMIN_OVERHEAD])
        cost_of_sales = cost_of_production + sum_closing(details[CostCategory.SELLING_OVERHEAD])

        logger.debug("Cost sheet: prime=%s cost_of_sales=%s", prime_cost, cost_of_sales)
        return CostSheet(
            details=details,
            prime_cost=prime_cost,
            works_cost=works_cost,
            cost_of_production=cost_of_production,
            cost_of_sales=cost_of_sales,
        )
