"""Chart of accounts models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AccountType(str, Enum):
    """Primary classification of an account head."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"


class CostCategory(str, Enum):
    """Cost sheet bucket an account head rolls up into."""

    DIRECT_MATERIAL = "Direct Material"
    DIRECT_LABOR = "Direct Labor"
    DIRECT_EXPENSE = "Direct Expense"
    FACTORY_OVERHEAD = "Factory Overhead"
    ADMIN_OVERHEAD = "Admin Overhead"
    SELLING_OVERHEAD = "Selling Overhead"
    NOT_APPLICABLE = "N/A"


class AccountHead(BaseModel):
    """One line of the chart of accounts."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Account code (e.g., '101')")
    name: str = Field(..., description="Account name used by journal entries")
    type: AccountType = Field(..., description="Asset, Liability, Equity, Revenue or Expense")
    cost_category: CostCategory = Field(
        CostCategory.NOT_APPLICABLE, description="Cost sheet bucket"
    )
    is_direct: bool = Field(False, description="Trading account (direct) vs P&L (indirect)")
