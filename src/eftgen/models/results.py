"""Validation and export result models."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field

from eftgen.models.transaction import EFTConfiguration

LINE_TERMINATOR = "\r\n"


class WarningCode(StrEnum):
    SHORT_NAME_DEFAULTED = "SHORT_NAME_DEFAULTED"
    SHORT_NAME_TRUNCATED = "SHORT_NAME_TRUNCATED"
    LONG_NAME_TRUNCATED = "LONG_NAME_TRUNCATED"
    NO_TRANSACTIONS = "NO_TRANSACTIONS"
    EMPTY_TRANSACTION = "EMPTY_TRANSACTION"
    TRANSACTION_SPLIT = "TRANSACTION_SPLIT"
    UNKNOWN_CPA_CODE = "UNKNOWN_CPA_CODE"
    AMOUNT_ROUNDED = "AMOUNT_ROUNDED"
    PAYEE_NAME_TRUNCATED = "PAYEE_NAME_TRUNCATED"
    DUPLICATE_CROSS_REFERENCE = "DUPLICATE_CROSS_REFERENCE"


class ValidationWarning(BaseModel):
    """A survivable problem: the file is still produced, possibly degraded."""

    code: WarningCode
    message: str
    transaction_index: Optional[int] = None
    segment_index: Optional[int] = None


class ValidationResult(BaseModel):
    """Outcome of a validation pass that found nothing fatal."""

    configuration: Optional[EFTConfiguration] = None  # with defaults filled in
    warnings: list[ValidationWarning] = Field(default_factory=list)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def merge(self, other: ValidationResult) -> ValidationResult:
        return ValidationResult(
            configuration=other.configuration or self.configuration,
            warnings=[*self.warnings, *other.warnings],
        )


class FileTotals(BaseModel):
    """Running trailer totals, amounts in cents, counts per payment segment."""

    debit_amount: int = 0
    debit_count: int = 0
    credit_amount: int = 0
    credit_count: int = 0

    def add(self, is_credit: bool, cents: int) -> None:
        if is_credit:
            self.credit_amount += cents
            self.credit_count += 1
        else:
            self.debit_amount += cents
            self.debit_count += 1


class ExportResult(BaseModel):
    """An encoded file together with the warnings raised while building it."""

    profile: str
    records: list[str] = Field(default_factory=list)
    totals: FileTotals = Field(default_factory=FileTotals)
    warnings: list[ValidationWarning] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return LINE_TERMINATOR.join(self.records)

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)
