"""eftgen exception hierarchy."""

from __future__ import annotations

from typing import Any


class EFTGeneratorError(Exception):
    """Base exception for all eftgen errors."""


class EFTValidationError(EFTGeneratorError):
    """Data cannot be encoded without breaking the file format."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {message}: {value!r}")


class ConfigurationValidationError(EFTValidationError):
    """The file configuration is unusable."""


class TransactionValidationError(EFTValidationError):
    """A transaction or one of its segments is unusable."""

    def __init__(
        self,
        field: str,
        value: Any,
        message: str,
        transaction_index: int | None = None,
        segment_index: int | None = None,
    ) -> None:
        self.transaction_index = transaction_index
        self.segment_index = segment_index
        super().__init__(field, value, message)


class UnknownProfileError(EFTGeneratorError):
    """No destination-bank profile is registered under the requested name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown bank profile {name!r}, expected one of: {', '.join(available)}")


class RecordLengthError(EFTGeneratorError):
    """An encoded record does not match the profile's fixed record length."""

    def __init__(self, record_type: str, sequence: int, length: int, expected: int) -> None:
        self.record_type = record_type
        self.sequence = sequence
        self.length = length
        self.expected = expected
        super().__init__(
            f"Record {sequence} ({record_type}) is {length} characters, expected {expected}"
        )


class FieldOverflowError(EFTGeneratorError):
    """A numeric value is wider than its fixed-width field."""

    def __init__(self, field: str, value: int, width: int) -> None:
        self.field = field
        self.value = value
        self.width = width
        super().__init__(f"{field} does not fit in {width} digits: {value}")


class WarningsNotAllowedError(EFTGeneratorError):
    """Validation produced warnings while fail_on_warnings is enabled."""

    def __init__(self, warnings: list[Any]) -> None:
        self.warnings = warnings
        super().__init__(f"Export blocked by {len(warnings)} validation warning(s)")
