"""CPA 005 record encoding.

A file is one ``A`` header, one ``C``/``D`` detail record per group of up to
six payment segments, and one ``Z`` trailer. Every record is padded to the
profile's record length. Input is assumed to have passed the validator, so
field contents are not re-checked, but a number too wide for its field raises
FieldOverflowError instead of shifting the fields after it.
"""

from __future__ import annotations

from collections.abc import Sequence

from eftgen.core.exceptions import FieldOverflowError, RecordLengthError
from eftgen.core.logging_config import get_logger
from eftgen.core.types import Record
from eftgen.formats.cpa005.profiles import BankProfile, get_profile
from eftgen.formats.julian import to_julian_date
from eftgen.models.results import FileTotals
from eftgen.models.transaction import EFTConfiguration, EFTTransaction, EFTTransactionSegment

logger = get_logger("formats.cpa005")

HEADER_RECORD_TYPE = "A"
TRAILER_RECORD_TYPE = "Z"

# Originator return details, originator sundry information, and the
# stored trace/settlement regions. Returns are not produced by this encoder.
_RETURN_FILLER = " " * 9 + " " * 12 + " " * 15 + " " * 22 + " " * 2
_TRAILING_ZEROS = "0" * 11


def _digits(value: int, width: int, field: str) -> str:
    text = str(value).zfill(width)
    if len(text) > width:
        raise FieldOverflowError(field, value, width)
    return text


def _file_creation_number(config: EFTConfiguration) -> str:
    return config.file_creation_number.zfill(4)[-4:]


def format_header(config: EFTConfiguration, profile: BankProfile | str | None = None) -> Record:
    profile = get_profile(profile)

    data_centre = " " * 5
    if config.destination_data_centre is not None:
        data_centre = config.destination_data_centre.zfill(5)

    currency = (config.destination_currency or "").ljust(3)

    header = (
        HEADER_RECORD_TYPE
        + "1".zfill(9)
        + config.originator_id.ljust(10)
        + _file_creation_number(config)
        + to_julian_date(config.file_creation_date)
        + data_centre
        + " " * 20
        + currency
    )
    return header.ljust(profile.record_length)


def _item_trace(segment: EFTTransactionSegment, segment_position: int, profile: BankProfile) -> str:
    if profile.honour_item_trace_override and segment.item_trace_number is not None:
        return segment.item_trace_number.zfill(18) + str(segment_position).zfill(4)
    return "0" * 22


def format_segment(
    config: EFTConfiguration,
    segment: EFTTransactionSegment,
    record_sequence: int,
    segment_position: int,
    profile: BankProfile | str | None = None,
) -> Record:
    """Render one 240 character payment segment.

    ``segment_position`` is 1-based within the owning transaction, so it keeps
    counting past the first physical record when a transaction is split.
    """
    profile = get_profile(profile)

    cross_reference_number = segment.cross_reference_number
    if cross_reference_number is None:
        cross_reference_number = f"f{config.file_creation_number}r{record_sequence}s{segment_position}"

    short_name = config.originator_short_name
    if short_name is None:
        short_name = config.originator_long_name

    return (
        str(segment.cpa_code).zfill(3)
        + _digits(segment.amount_in_cents, 10, "amount")
        + to_julian_date(segment.payment_date)
        + segment.bank_institution_number.zfill(profile.institution_digits).rjust(4)
        + segment.bank_transit_number.zfill(5)
        + segment.bank_account_number.ljust(12)
        + _item_trace(segment, segment_position, profile)
        + "000"
        + short_name.ljust(15)[:15]
        + segment.payee_name.ljust(30)[:30]
        + config.originator_long_name.ljust(30)[:30]
        + config.originator_id[:5].ljust(10)
        + cross_reference_number.ljust(19)[:19]
        + _RETURN_FILLER
        + _TRAILING_ZEROS
    )


def format_detail_records(
    config: EFTConfiguration,
    transactions: Sequence[EFTTransaction],
    profile: BankProfile | str | None = None,
) -> tuple[list[Record], FileTotals]:
    """Pack transaction segments into detail records.

    Sequence numbers start at 2, after the header. Transactions without
    segments produce no record.
    """
    profile = get_profile(profile)
    per_record = profile.segments_per_record

    records: list[Record] = []
    totals = FileTotals()
    record_sequence = 1

    for transaction in transactions:
        record = ""

        for segment_index, segment in enumerate(transaction.segments):
            if segment_index % per_record == 0:
                if record:
                    records.append(record.ljust(profile.record_length))

                record_sequence += 1
                record = (
                    transaction.record_type
                    + _digits(record_sequence, 9, "record_sequence")
                    + config.originator_id.ljust(10)
                    + _file_creation_number(config)
                )

            record += format_segment(config, segment, record_sequence, segment_index + 1, profile)
            totals.add(transaction.is_credit, segment.amount_in_cents)

        if record:
            records.append(record.ljust(profile.record_length))

    return records, totals


def format_trailer(
    config: EFTConfiguration,
    totals: FileTotals,
    record_count: int,
    profile: BankProfile | str | None = None,
) -> Record:
    """Render the trailer. ``record_count`` covers the header and detail records."""
    profile = get_profile(profile)

    trailer = (
        TRAILER_RECORD_TYPE
        + _digits(record_count + 1, 9, "record_sequence")
        + config.originator_id.ljust(10)
        + _file_creation_number(config)
        + _digits(totals.debit_amount, 14, "debit_amount")
        + _digits(totals.debit_count, 8, "debit_count")
        + _digits(totals.credit_amount, 14, "credit_amount")
        + _digits(totals.credit_count, 8, "credit_count")
    )
    return trailer.ljust(profile.record_length)


def encode_cpa005(
    config: EFTConfiguration,
    transactions: Sequence[EFTTransaction],
    profile: BankProfile | str | None = None,
) -> tuple[list[Record], FileTotals]:
    """Encode a validated file into its ordered physical records."""
    profile = get_profile(profile)

    details, totals = format_detail_records(config, transactions, profile)
    records = [format_header(config, profile), *details]
    records.append(format_trailer(config, totals, len(records), profile))

    for sequence, record in enumerate(records, start=1):
        if len(record) != profile.record_length:
            raise RecordLengthError(record[:1], sequence, len(record), profile.record_length)

    logger.debug(
        "Encoded %d records (%d credits, %d debits) with profile %s",
        len(records),
        totals.credit_count,
        totals.debit_count,
        profile.name,
    )
    return records, totals
