"""Journal entry model."""

import datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

AMOUNT_QUANTUM = Decimal("0.01")


class JournalEntry(BaseModel):
    """
    A single dated debit/credit posting.

    Validation is the producer-side guard: amounts must be finite, positive
    and are rounded to two decimals. ``model_construct`` skips it, and the
    ledger core never checks again.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Entry identifier")
    date: datetime.date = Field(..., description="Posting date")
    description: str = Field("", description="Narration")
    debit_account: str = Field(..., min_length=1, description="Account name debited")
    credit_account: str = Field(..., min_length=1, description="Account name credited")
    amount: Decimal = Field(..., gt=0, allow_inf_nan=False, description="Positive amount")
    tenant_id: str = Field(..., description="Client/tenant the entry belongs to")

    @field_validator("debit_account", "credit_account", "description", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("amount")
    @classmethod
    def _round_amount(cls, value: Decimal) -> Decimal:
        rounded = value.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
        if rounded <= 0:
            raise ValueError("amount rounds to zero")
        return rounded
