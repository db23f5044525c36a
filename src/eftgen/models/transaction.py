"""Input models: file configuration, transactions and their payment segments.

Only types are enforced here. Format rules live in the CPA 005 validator,
which reports problems as warnings or as a fatal EFTValidationError.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from eftgen.core.types import Cents, CPACode


def _calendar_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    return value


class RecordType(StrEnum):
    CREDIT = "C"  # sending funds
    DEBIT = "D"  # receiving funds


class EFTConfiguration(BaseModel):
    """Originator and file-level settings, one per output file."""

    # Also known as Client Number, Company ID or Customer Number
    originator_id: str
    originator_short_name: Optional[str] = None
    originator_long_name: str

    # Should differ from the previous 10 numbers submitted for processing
    file_creation_number: str
    file_creation_date: Optional[date] = None

    # Also known as Processing Centre
    destination_data_centre: Optional[str] = None
    destination_currency: Optional[str] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("file_creation_date", mode="before")
    @classmethod
    def reduce_datetime(cls, value: Any) -> Any:
        return _calendar_date(value)


class EFTTransactionSegment(BaseModel):
    """A single payment instruction."""

    cpa_code: CPACode
    amount: Decimal  # dollars
    payment_date: Optional[date] = None

    bank_institution_number: str
    bank_transit_number: str
    bank_account_number: str

    payee_name: str
    cross_reference_number: Optional[str] = None

    # Destination-bank specific, see BankProfile.honour_item_trace_override
    item_trace_number: Optional[str] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("payment_date", mode="before")
    @classmethod
    def reduce_datetime(cls, value: Any) -> Any:
        return _calendar_date(value)

    @field_validator("amount", mode="before")
    @classmethod
    def float_as_written(cls, value: Any) -> Any:
        # 12.34 should mean Decimal("12.34"), not the binary approximation
        if isinstance(value, float):
            return Decimal(repr(value))
        return value

    @property
    def amount_in_cents(self) -> Cents:
        """Amount rounded half-up to whole cents."""
        return int((self.amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class EFTTransaction(BaseModel):
    """A credit or debit with one or more payment segments."""

    record_type: str
    segments: list[EFTTransactionSegment] = Field(default_factory=list)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @property
    def is_credit(self) -> bool:
        return self.record_type == RecordType.CREDIT
