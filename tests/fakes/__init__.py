"""Shared builders for configurations, segments and transactions."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from eftgen.models.transaction import EFTConfiguration, EFTTransaction, EFTTransactionSegment

FILE_DATE = date(2024, 3, 1)  # leap year, day 061
PAYMENT_DATE = date(2024, 12, 31)  # day 366


def make_configuration(**overrides: Any) -> EFTConfiguration:
    fields: dict[str, Any] = {
        "originator_id": "0000012345",
        "originator_short_name": "TEST CO",
        "originator_long_name": "Test Company Incorporated",
        "file_creation_number": "0001",
        "file_creation_date": FILE_DATE,
    }
    fields.update(overrides)
    return EFTConfiguration(**fields)


def make_segment(**overrides: Any) -> EFTTransactionSegment:
    fields: dict[str, Any] = {
        "cpa_code": 450,
        "amount": Decimal("12.34"),
        "payment_date": PAYMENT_DATE,
        "bank_institution_number": "001",
        "bank_transit_number": "12345",
        "bank_account_number": "123456789",
        "payee_name": "Jane Doe",
    }
    fields.update(overrides)
    return EFTTransactionSegment(**fields)


def make_transaction(record_type: str = "C", segment_count: int = 1, **segment_overrides: Any) -> EFTTransaction:
    return EFTTransaction(
        record_type=record_type,
        segments=[make_segment(**segment_overrides) for _ in range(segment_count)],
    )


__all__ = ["FILE_DATE", "PAYMENT_DATE", "make_configuration", "make_segment", "make_transaction"]
