"""Destination-bank layout profiles for CPA 005 files.

Receiving institutions disagree on a couple of detail-record regions. Each
profile names one convention, and the encoder reads its widths from here
instead of branching on the bank.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from eftgen.core.exceptions import UnknownProfileError

DEFAULT_PROFILE = "cpa005"
SEGMENT_LENGTH = 240
DETAIL_PREFIX_LENGTH = 24  # record type, sequence, originator id, file creation number


class BankProfile(BaseModel):
    """Field conventions for one destination-bank variant."""

    name: str
    description: str = ""
    record_length: int = 1464
    segments_per_record: int = Field(default=6, ge=1)

    # Width of the zero-padded institution number. The field is always four
    # characters; narrower institution numbers are led by a space.
    institution_digits: int = Field(default=4, ge=1, le=4)

    # When False the item trace region is always 22 zeros.
    honour_item_trace_override: bool = True

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def segments_fit_record(self) -> "BankProfile":
        needed = DETAIL_PREFIX_LENGTH + self.segments_per_record * SEGMENT_LENGTH
        if needed > self.record_length:
            raise ValueError(
                f"{self.segments_per_record} segments need {needed} characters, "
                f"record_length is {self.record_length}"
            )
        return self


CPA005 = BankProfile(
    name="cpa005",
    description="CPA 005 with a 4-digit institution and item trace overrides (ATB style).",
)

CPA005_LEGACY = BankProfile(
    name="cpa005-legacy",
    description="CPA 005 with a space-led 3-digit institution and a zero item trace.",
    institution_digits=3,
    honour_item_trace_override=False,
)

_PROFILES: dict[str, BankProfile] = {p.name: p for p in (CPA005, CPA005_LEGACY)}


def register_profile(profile: BankProfile) -> None:
    """Add or replace a profile in the registry."""
    _PROFILES[profile.name] = profile


def get_profile(name: str | BankProfile | None = None) -> BankProfile:
    if isinstance(name, BankProfile):
        return name
    key = name or DEFAULT_PROFILE
    try:
        return _PROFILES[key]
    except KeyError:
        raise UnknownProfileError(key, available_profiles()) from None


def available_profiles() -> list[str]:
    return sorted(_PROFILES)
