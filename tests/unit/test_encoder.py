"""Tests for CPA 005 header, detail and trailer encoding."""

from __future__ import annotations

from decimal import Decimal

import pytest

from eftgen.core.exceptions import FieldOverflowError, RecordLengthError
from eftgen.formats.cpa005.encoder import (
    encode_cpa005,
    format_detail_records,
    format_header,
    format_segment,
    format_trailer,
)
from eftgen.formats.cpa005.profiles import CPA005_LEGACY, BankProfile
from eftgen.models.results import FileTotals
from eftgen.models.transaction import EFTTransaction
from tests.fakes import make_configuration, make_segment, make_transaction

RECORD_LENGTH = 1464
PREFIX = 24
SEGMENT = 240


def _segment(record: str, index: int = 0) -> str:
    start = PREFIX + index * SEGMENT
    return record[start:start + SEGMENT]


class TestHeader:
    def test_layout(self):
        header = format_header(make_configuration(destination_data_centre="120", destination_currency="CAD"))
        assert len(header) == RECORD_LENGTH
        assert header[0] == "A"
        assert header[1:10] == "000000001"
        assert header[10:20] == "0000012345"
        assert header[20:24] == "0001"
        assert header[24:30] == "024061"
        assert header[30:35] == "00120"
        assert header[35:55] == " " * 20
        assert header[55:58] == "CAD"
        assert header[58:] == " " * 1406

    def test_unset_optional_fields_are_blank(self):
        header = format_header(make_configuration(originator_id="ABC", file_creation_number="7"))
        assert header[10:20] == "ABC       "
        assert header[20:24] == "0007"
        assert header[30:35] == " " * 5
        assert header[55:58] == " " * 3


class TestSegment:
    def test_layout(self):
        block = format_segment(make_configuration(), make_segment(), record_sequence=2, segment_position=1)
        assert len(block) == SEGMENT
        assert block[0:3] == "450"
        assert block[3:13] == "0000001234"
        assert block[13:19] == "024366"
        assert block[19:23] == "0001"
        assert block[23:28] == "12345"
        assert block[28:40] == "123456789   "
        assert block[40:62] == "0" * 22
        assert block[62:65] == "000"
        assert block[65:80] == "TEST CO".ljust(15)
        assert block[80:110] == "Jane Doe".ljust(30)
        assert block[110:140] == "Test Company Incorporated".ljust(30)
        assert block[140:150] == "00000     "
        assert block[150:169] == "f0001r2s1".ljust(19)
        assert block[169:229] == " " * 60
        assert block[229:240] == "0" * 11

    def test_short_cpa_code_is_zero_padded(self):
        block = format_segment(make_configuration(), make_segment(cpa_code=7), 2, 1)
        assert block[0:3] == "007"
        assert len(block) == SEGMENT

    def test_names_are_truncated(self):
        config = make_configuration(originator_short_name="S" * 20, originator_long_name="L" * 40)
        block = format_segment(config, make_segment(payee_name="P" * 40), 2, 1)
        assert block[65:80] == "S" * 15
        assert block[80:110] == "P" * 30
        assert block[110:140] == "L" * 30
        assert len(block) == SEGMENT

    def test_short_name_falls_back_to_long_name(self):
        config = make_configuration(originator_short_name=None, originator_long_name="Long Name")
        block = format_segment(config, make_segment(), 2, 1)
        assert block[65:80] == "Long Name".ljust(15)

    def test_supplied_cross_reference_is_kept(self):
        block = format_segment(make_configuration(), make_segment(cross_reference_number="INV-2024-0001"), 2, 1)
        assert block[150:169] == "INV-2024-0001".ljust(19)

    def test_long_cross_reference_is_truncated(self):
        block = format_segment(make_configuration(), make_segment(cross_reference_number="X" * 25), 2, 1)
        assert block[150:169] == "X" * 19

    def test_item_trace_override(self):
        block = format_segment(make_configuration(), make_segment(item_trace_number="219000000000000000"), 3, 5)
        assert block[40:62] == "219000000000000000" + "0005"

    def test_short_item_trace_override_is_zero_filled(self):
        block = format_segment(make_configuration(), make_segment(item_trace_number="12345"), 3, 2)
        assert block[40:62] == "0000000000000123450002"

    def test_legacy_profile(self):
        segment = make_segment(item_trace_number="219000000000000000")
        block = format_segment(make_configuration(), segment, 2, 1, CPA005_LEGACY)
        assert block[19:23] == " 001"
        assert block[40:62] == "0" * 22
        assert len(block) == SEGMENT


class TestDetailRecords:
    def test_one_record_per_transaction(self):
        records, totals = format_detail_records(
            make_configuration(), [make_transaction("C"), make_transaction("D")]
        )
        assert len(records) == 2
        assert records[0][:10] == "C000000002"
        assert records[1][:10] == "D000000003"
        assert records[0][10:24] == "00000123450001"
        assert all(len(r) == RECORD_LENGTH for r in records)

    def test_six_segments_fill_one_record(self):
        records, _ = format_detail_records(make_configuration(), [make_transaction(segment_count=6)])
        assert len(records) == 1
        assert _segment(records[0], 5)[0:3] == "450"

    def test_seven_segments_split(self):
        records, totals = format_detail_records(make_configuration(), [make_transaction("D", segment_count=7)])
        assert len(records) == 2
        assert records[0][0] == records[1][0] == "D"
        assert records[0][1:10] == "000000002"
        assert records[1][1:10] == "000000003"
        seventh = _segment(records[1], 0)
        assert seventh[150:169].rstrip() == "f0001r3s7"
        assert records[1][PREFIX + SEGMENT:] == " " * (RECORD_LENGTH - PREFIX - SEGMENT)
        assert totals.debit_count == 7

    def test_cross_reference_fallback_tracks_physical_sequence(self):
        transactions = [make_transaction(segment_count=2), make_transaction(segment_count=1)]
        records, _ = format_detail_records(make_configuration(file_creation_number="12"), transactions)
        assert _segment(records[0], 0)[150:169].rstrip() == "f12r2s1"
        assert _segment(records[0], 1)[150:169].rstrip() == "f12r2s2"
        assert _segment(records[1], 0)[150:169].rstrip() == "f12r3s1"

    def test_empty_transaction_emits_nothing(self):
        transactions = [make_transaction(), EFTTransaction(record_type="C"), make_transaction()]
        records, totals = format_detail_records(make_configuration(), transactions)
        assert len(records) == 2
        assert records[1][1:10] == "000000003"
        assert totals.credit_count == 2

    def test_totals(self):
        transactions = [
            make_transaction("C", segment_count=2, amount=Decimal("10.00")),
            make_transaction("D", segment_count=3, amount=Decimal("0.01")),
            make_transaction("C", amount=Decimal("99999999.99")),
        ]
        _, totals = format_detail_records(make_configuration(), transactions)
        assert totals == FileTotals(
            credit_amount=2000 + 9_999_999_999,
            credit_count=3,
            debit_amount=3,
            debit_count=3,
        )

    def test_profile_controls_chunk_size(self):
        profile = BankProfile(name="pairs", segments_per_record=2)
        records, _ = format_detail_records(make_configuration(), [make_transaction(segment_count=5)], profile)
        assert len(records) == 3


class TestTrailer:
    def test_layout(self):
        totals = FileTotals(debit_amount=500, debit_count=2, credit_amount=123456, credit_count=3)
        trailer = format_trailer(make_configuration(), totals, record_count=4)
        assert len(trailer) == RECORD_LENGTH
        assert trailer[0] == "Z"
        assert trailer[1:10] == "000000005"
        assert trailer[10:20] == "0000012345"
        assert trailer[20:24] == "0001"
        assert trailer[24:38] == "00000000000500"
        assert trailer[38:46] == "00000002"
        assert trailer[46:60] == "00000000123456"
        assert trailer[60:68] == "00000003"
        assert trailer[68:] == " " * 1396


class TestEncode:
    def test_record_order_and_count(self):
        records, totals = encode_cpa005(make_configuration(), [make_transaction(), make_transaction("D")])
        assert [r[0] for r in records] == ["A", "C", "D", "Z"]
        assert records[-1][1:10] == "000000004"
        assert totals.credit_count == totals.debit_count == 1

    def test_no_transactions(self):
        records, _ = encode_cpa005(make_configuration(), [])
        assert [r[0] for r in records] == ["A", "Z"]
        assert records[-1][1:10] == "000000002"

    def test_length_guard(self):
        # model_construct skips the profile's own fit check
        profile = BankProfile.model_construct(
            name="short-header",
            record_length=40,
            segments_per_record=6,
            institution_digits=4,
            honour_item_trace_override=True,
        )
        with pytest.raises(RecordLengthError) as exc_info:
            encode_cpa005(make_configuration(), [], profile)
        assert exc_info.value.record_type == "A"
        assert exc_info.value.expected == 40


class TestFieldWidths:
    def test_debit_total_overflow_does_not_shift_trailer(self):
        segment = make_segment(amount=Decimal("99999999.99"))
        transaction = EFTTransaction(record_type="D", segments=[segment] * 10_001)
        with pytest.raises(FieldOverflowError) as exc_info:
            encode_cpa005(make_configuration(), [transaction])
        assert exc_info.value.field == "debit_amount"
        assert exc_info.value.width == 14

    @pytest.mark.parametrize(
        "totals,field",
        [
            (FileTotals(credit_amount=10**14), "credit_amount"),
            (FileTotals(debit_count=10**8), "debit_count"),
            (FileTotals(credit_count=10**8), "credit_count"),
        ],
    )
    def test_trailer_totals(self, totals, field):
        with pytest.raises(FieldOverflowError) as exc_info:
            format_trailer(make_configuration(), totals, record_count=2)
        assert exc_info.value.field == field

    def test_trailer_sequence(self):
        format_trailer(make_configuration(), FileTotals(), record_count=999_999_998)
        with pytest.raises(FieldOverflowError) as exc_info:
            format_trailer(make_configuration(), FileTotals(), record_count=999_999_999)
        assert exc_info.value.field == "record_sequence"
        assert exc_info.value.value == 1_000_000_000

    def test_segment_amount(self):
        with pytest.raises(FieldOverflowError) as exc_info:
            format_segment(make_configuration(), make_segment(amount=Decimal("100000000.00")), 2, 1)
        assert exc_info.value.field == "amount"
