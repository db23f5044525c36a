"""EFTGenerator: holds one file in progress and exports it."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from eftgen.core.config import EFTSettings
from eftgen.core.exceptions import EFTGeneratorError, WarningsNotAllowedError
from eftgen.core.logging_config import get_logger
from eftgen.formats.cpa005.encoder import encode_cpa005
from eftgen.formats.cpa005.profiles import BankProfile, get_profile
from eftgen.formats.cpa005.validator import validate_cpa005
from eftgen.models.results import ExportResult, ValidationResult
from eftgen.models.transaction import EFTConfiguration, EFTTransaction

logger = get_logger("generator")


class EFTGenerator:
    """Collects a configuration and transactions, then renders them as CPA 005.

    Not safe for concurrent mutation; callers adding transactions from
    several threads must serialize those calls themselves.
    """

    def __init__(
        self,
        configuration: EFTConfiguration | Mapping[str, Any] | None = None,
        *,
        profile: BankProfile | str | None = None,
        settings: EFTSettings | None = None,
    ) -> None:
        self._settings = settings or EFTSettings()
        self._profile = get_profile(profile or self._settings.profile)
        self._configuration: Optional[EFTConfiguration] = None
        self._transactions: list[EFTTransaction] = []
        if configuration is not None:
            self.set_configuration(configuration)

    @property
    def profile(self) -> BankProfile:
        return self._profile

    def set_configuration(self, configuration: EFTConfiguration | Mapping[str, Any]) -> None:
        self._configuration = EFTConfiguration.model_validate(configuration)

    def get_configuration(self) -> EFTConfiguration:
        if self._configuration is None:
            raise EFTGeneratorError("No configuration has been set")
        return self._configuration

    def add_transaction(self, transaction: EFTTransaction | Mapping[str, Any]) -> EFTTransaction:
        transaction = EFTTransaction.model_validate(transaction)
        self._transactions.append(transaction)
        return transaction

    def get_transactions(self) -> list[EFTTransaction]:
        return list(self._transactions)

    def validate_cpa005(self) -> ValidationResult:
        """Run the CPA 005 validator. Raises on the first fatal problem."""
        return validate_cpa005(self.get_configuration(), self._transactions, self._profile)

    def export_cpa005(self) -> ExportResult:
        validation = self.validate_cpa005()

        if validation.warning_count > 0:
            if self._settings.fail_on_warnings:
                raise WarningsNotAllowedError(validation.warnings)
            logger.info("Proceeding with %d warnings.", validation.warning_count)

        records, totals = encode_cpa005(validation.configuration, self._transactions, self._profile)

        return ExportResult(
            profile=self._profile.name,
            records=records,
            totals=totals,
            warnings=validation.warnings,
        )

    def to_cpa005(self) -> str:
        """Return the CPA 005 file text, records joined with CRLF."""
        return self.export_cpa005().text
