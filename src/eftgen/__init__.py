"""Electronic Funds Transfer file generation in the CPA 005 format."""

from __future__ import annotations

from eftgen.core.config import EFTSettings
from eftgen.core.exceptions import (
    ConfigurationValidationError,
    EFTGeneratorError,
    EFTValidationError,
    FieldOverflowError,
    RecordLengthError,
    TransactionValidationError,
    UnknownProfileError,
    WarningsNotAllowedError,
)
from eftgen.formats.cpa_codes import describe_cpa_code, is_valid_cpa_code
from eftgen.generator import EFTGenerator
from eftgen.models.results import ExportResult, FileTotals, ValidationResult, ValidationWarning, WarningCode
from eftgen.models.transaction import EFTConfiguration, EFTTransaction, EFTTransactionSegment, RecordType

__all__ = [
    "ConfigurationValidationError",
    "EFTConfiguration",
    "EFTGenerator",
    "EFTGeneratorError",
    "EFTSettings",
    "EFTTransaction",
    "EFTTransactionSegment",
    "EFTValidationError",
    "ExportResult",
    "FieldOverflowError",
    "FileTotals",
    "RecordLengthError",
    "RecordType",
    "TransactionValidationError",
    "UnknownProfileError",
    "ValidationResult",
    "ValidationWarning",
    "WarningCode",
    "WarningsNotAllowedError",
    "describe_cpa_code",
    "is_valid_cpa_code",
]
