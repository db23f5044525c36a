"""CPA 005 validation, encoding and destination-bank profiles."""

from __future__ import annotations

from eftgen.formats.cpa005.encoder import encode_cpa005, format_header, format_trailer
from eftgen.formats.cpa005.profiles import BankProfile, available_profiles, get_profile, register_profile
from eftgen.formats.cpa005.validator import validate_configuration, validate_cpa005, validate_transactions

__all__ = [
    "BankProfile",
    "available_profiles",
    "encode_cpa005",
    "format_header",
    "format_trailer",
    "get_profile",
    "register_profile",
    "validate_configuration",
    "validate_cpa005",
    "validate_transactions",
]
