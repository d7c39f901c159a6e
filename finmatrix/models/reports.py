"""Ledger balance and financial report models."""

from decimal import Decimal
from typing import Annotated, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .accounts import AccountType, CostCategory

ZERO = Decimal("0")

# Derived sums; a corrupt amount that slipped past entry validation propagates.
Amount = Annotated[Decimal, Field(allow_inf_nan=True)]


class ReportModel(BaseModel):
    """Immutable report value; dumps with camelCase names when ``by_alias=True``."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class LedgerBalance(ReportModel):
    """Net position of one account across a set of entries."""

    account_name: str = Field(..., description="Account name as posted")
    total_debit: Amount = Field(ZERO, description="Sum of debit postings")
    total_credit: Amount = Field(ZERO, description="Sum of credit postings")
    closing_balance: Amount = Field(
        ZERO, description="total_debit - total_credit; positive means a debit balance"
    )
    type: AccountType = Field(..., description="Account type resolved from the chart")


class TradingAccount(ReportModel):
    """Direct revenue against cost of goods sold."""

    revenue: List[LedgerBalance] = Field(default_factory=list)
    cogs: List[LedgerBalance] = Field(default_factory=list)
    total_revenue: Amount = ZERO
    total_cogs: Amount = ZERO
    gross_profit: Amount = ZERO


class ProfitAndLoss(ReportModel):
    """Indirect income and expenses applied to gross profit."""

    income: List[LedgerBalance] = Field(default_factory=list)
    expenses: List[LedgerBalance] = Field(default_factory=list)
    total_indirect_income: Amount = ZERO
    total_indirect_expense: Amount = ZERO
    net_profit: Amount = ZERO


class BalanceSheet(ReportModel):
    """
    Asset, liability and equity ledgers.

    Net profit is not carried into equity here and there is no combined
    liabilities-plus-equity total; see ``tables.balance_sheet_closure``.
    """

    assets: List[LedgerBalance] = Field(default_factory=list)
    liabilities: List[LedgerBalance] = Field(default_factory=list)
    equity: List[LedgerBalance] = Field(default_factory=list)
    total_assets: Amount = ZERO


def _empty_cost_details() -> Dict[CostCategory, List[LedgerBalance]]:
    return {
        category: []
        for category in CostCategory
        if category is not CostCategory.NOT_APPLICABLE
    }


class CostSheet(ReportModel):
    """Ledgers grouped by cost category plus the cumulative cost stages."""

    details: Dict[CostCategory, List[LedgerBalance]] = Field(default_factory=_empty_cost_details)
    prime_cost: Amount = ZERO
    works_cost: Amount = ZERO
    cost_of_production: Amount = ZERO
    cost_of_sales: Amount = ZERO


class FinancialReportData(ReportModel):
    """Everything a presenter needs, derived from one filtered entry set."""

    ledgers: List[LedgerBalance] = Field(default_factory=list)
    trading: TradingAccount = Field(default_factory=TradingAccount)
    pnl: ProfitAndLoss = Field(default_factory=ProfitAndLoss)
    balance_sheet: BalanceSheet = Field(default_factory=BalanceSheet)
    cost_sheet: CostSheet = Field(default_factory=CostSheet)
