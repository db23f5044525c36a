"""CPA 005 field validation.

Two severities. Anything that would break the fixed-width layout raises an
EFTValidationError immediately. Anything the encoder can survive by
truncating, defaulting or splitting becomes a ValidationWarning, and the
scan carries on so every warning in the file is reported at once.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal
from typing import Optional

from eftgen.core.exceptions import ConfigurationValidationError, TransactionValidationError
from eftgen.core.logging_config import get_logger
from eftgen.formats.cpa005.profiles import BankProfile, get_profile
from eftgen.formats.cpa_codes import CPA_CODE_MAX, CPA_CODE_MIN, is_valid_cpa_code
from eftgen.models.results import FileTotals, ValidationResult, ValidationWarning, WarningCode
from eftgen.models.transaction import EFTConfiguration, EFTTransaction, RecordType

logger = get_logger("formats.cpa005")

MAX_TRANSACTION_COUNT = 999_999_999
MAX_AMOUNT = Decimal("100000000")
MAX_AMOUNT_CENTS = 9_999_999_999

# Trailer field widths
MAX_RECORD_SEQUENCE = 999_999_999
MAX_TOTAL_CENTS = 99_999_999_999_999
MAX_SEGMENT_COUNT = 99_999_999

SUPPORTED_CURRENCIES = ("CAD", "USD")

_FILE_CREATION_NUMBER = re.compile(r"[0-9]{1,4}")
_DATA_CENTRE = re.compile(r"[0-9]{0,5}")
_INSTITUTION_NUMBER = re.compile(r"[0-9]{1,3}")
_TRANSIT_NUMBER = re.compile(r"[0-9]{1,5}")
_ACCOUNT_NUMBER = re.compile(r"[0-9]{1,12}")
_ITEM_TRACE_NUMBER = re.compile(r"[0-9]{1,18}")


def _warn(
    warnings: list[ValidationWarning],
    code: WarningCode,
    message: str,
    transaction_index: Optional[int] = None,
    segment_index: Optional[int] = None,
) -> None:
    logger.debug(message)
    warnings.append(
        ValidationWarning(
            code=code,
            message=message,
            transaction_index=transaction_index,
            segment_index=segment_index,
        )
    )


def validate_configuration(config: EFTConfiguration) -> ValidationResult:
    """Check file-level settings.

    Returns a copy of ``config`` with the short name defaulted to the long
    name when it was not supplied. ``config`` itself is left untouched.
    """
    warnings: list[ValidationWarning] = []

    if len(config.originator_id) > 10:
        raise ConfigurationValidationError("originator_id", config.originator_id, "length exceeds 10")

    if not _FILE_CREATION_NUMBER.fullmatch(config.file_creation_number):
        raise ConfigurationValidationError(
            "file_creation_number", config.file_creation_number, "should be 1 to 4 digits"
        )

    if config.destination_data_centre is not None and not _DATA_CENTRE.fullmatch(
        config.destination_data_centre
    ):
        raise ConfigurationValidationError(
            "destination_data_centre", config.destination_data_centre, "should be up to 5 digits"
        )

    short_name = config.originator_short_name
    if short_name is None:
        _warn(
            warnings,
            WarningCode.SHORT_NAME_DEFAULTED,
            "originator_short_name not defined, using originator_long_name.",
        )
        short_name = config.originator_long_name

    if len(short_name) > 15:
        _warn(
            warnings,
            WarningCode.SHORT_NAME_TRUNCATED,
            f"originator_short_name will be truncated: {short_name}",
        )

    if len(config.originator_long_name) > 30:
        _warn(
            warnings,
            WarningCode.LONG_NAME_TRUNCATED,
            f"originator_long_name will be truncated: {config.originator_long_name}",
        )

    if config.destination_currency not in (None, "", *SUPPORTED_CURRENCIES):
        raise ConfigurationValidationError(
            "destination_currency", config.destination_currency, "is not supported"
        )

    filled = config.model_copy(update={"originator_short_name": short_name})
    return ValidationResult(configuration=filled, warnings=warnings)


def validate_transactions(
    transactions: Sequence[EFTTransaction],
    profile: BankProfile | str | None = None,
) -> ValidationResult:
    """Check every transaction and segment, in order."""
    profile = get_profile(profile)
    warnings: list[ValidationWarning] = []

    if len(transactions) == 0:
        _warn(warnings, WarningCode.NO_TRANSACTIONS, "There are no transactions to include in the file.")
    elif len(transactions) > MAX_TRANSACTION_COUNT:
        raise TransactionValidationError(
            "transactions", len(transactions), f"count exceeds {MAX_TRANSACTION_COUNT:,}"
        )

    cross_reference_numbers: set[str] = set()
    totals = FileTotals()
    record_count = 1  # header

    for t_index, transaction in enumerate(transactions):
        if len(transaction.segments) == 0:
            _warn(
                warnings,
                WarningCode.EMPTY_TRANSACTION,
                "Transaction record has no segments, will be ignored.",
                t_index,
            )

        if len(transaction.segments) > profile.segments_per_record:
            _warn(
                warnings,
                WarningCode.TRANSACTION_SPLIT,
                f"Transaction record has more than {profile.segments_per_record} segments, "
                "will be split into multiple records.",
                t_index,
            )

        if transaction.record_type not in (RecordType.CREDIT, RecordType.DEBIT):
            raise TransactionValidationError(
                "record_type", transaction.record_type, "is not supported", t_index
            )

        record_count += -(-len(transaction.segments) // profile.segments_per_record)
        trailer_sequence = record_count + 1
        if trailer_sequence > MAX_RECORD_SEQUENCE:
            raise TransactionValidationError(
                "record_sequence",
                trailer_sequence,
                f"exceeds {MAX_RECORD_SEQUENCE:,}",
                t_index,
            )

        for s_index, segment in enumerate(transaction.segments):

            def fail(field: str, value: object, message: str) -> TransactionValidationError:
                return TransactionValidationError(field, value, message, t_index, s_index)

            if not CPA_CODE_MIN <= segment.cpa_code <= CPA_CODE_MAX:
                raise fail("cpa_code", segment.cpa_code, "should be 3 digits")

            if not is_valid_cpa_code(segment.cpa_code):
                _warn(
                    warnings,
                    WarningCode.UNKNOWN_CPA_CODE,
                    f"Unknown CPA code: {segment.cpa_code}",
                    t_index,
                    s_index,
                )

            if segment.amount <= 0:
                raise fail("amount", segment.amount, "cannot be less than or equal to zero")

            if segment.amount >= MAX_AMOUNT:
                raise fail("amount", segment.amount, "cannot exceed $100,000,000")

            if segment.amount != segment.amount.quantize(Decimal("0.01")):
                cents = segment.amount_in_cents
                if cents == 0:
                    raise fail("amount", segment.amount, "rounds to zero cents")
                if cents > MAX_AMOUNT_CENTS:
                    raise fail("amount", segment.amount, "rounds up to $100,000,000")
                _warn(
                    warnings,
                    WarningCode.AMOUNT_ROUNDED,
                    f"amount will be rounded to the nearest cent: {segment.amount}",
                    t_index,
                    s_index,
                )

            totals.add(transaction.is_credit, segment.amount_in_cents)
            if transaction.is_credit:
                side, amount_total, count = "credit", totals.credit_amount, totals.credit_count
            else:
                side, amount_total, count = "debit", totals.debit_amount, totals.debit_count

            if amount_total > MAX_TOTAL_CENTS:
                raise fail(f"{side}_amount", amount_total, f"exceeds {MAX_TOTAL_CENTS:,} cents")

            if count > MAX_SEGMENT_COUNT:
                raise fail(f"{side}_count", count, f"exceeds {MAX_SEGMENT_COUNT:,} segments")

            if not _INSTITUTION_NUMBER.fullmatch(segment.bank_institution_number):
                raise fail(
                    "bank_institution_number", segment.bank_institution_number, "should be 1 to 3 digits"
                )

            if not _TRANSIT_NUMBER.fullmatch(segment.bank_transit_number):
                raise fail("bank_transit_number", segment.bank_transit_number, "should be 1 to 5 digits")

            if not _ACCOUNT_NUMBER.fullmatch(segment.bank_account_number):
                raise fail("bank_account_number", segment.bank_account_number, "should be 1 to 12 digits")

            # Profiles that ignore the override never encode it
            if (
                profile.honour_item_trace_override
                and segment.item_trace_number is not None
                and not _ITEM_TRACE_NUMBER.fullmatch(segment.item_trace_number)
            ):
                raise fail("item_trace_number", segment.item_trace_number, "should be 1 to 18 digits")

            if len(segment.payee_name) > 30:
                _warn(
                    warnings,
                    WarningCode.PAYEE_NAME_TRUNCATED,
                    f"payee_name will be truncated: {segment.payee_name}",
                    t_index,
                    s_index,
                )

            if segment.cross_reference_number is not None:
                if segment.cross_reference_number in cross_reference_numbers:
                    _warn(
                        warnings,
                        WarningCode.DUPLICATE_CROSS_REFERENCE,
                        f"cross_reference_number should be unique: {segment.cross_reference_number}",
                        t_index,
                        s_index,
                    )
                cross_reference_numbers.add(segment.cross_reference_number)

    return ValidationResult(warnings=warnings)


def validate_cpa005(
    config: EFTConfiguration,
    transactions: Sequence[EFTTransaction],
    profile: BankProfile | str | None = None,
) -> ValidationResult:
    """Validate a whole file. The result carries the filled-in configuration."""
    return validate_configuration(config).merge(validate_transactions(transactions, profile))
