"""Modern Julian dates as used by CPA 005 date fields.

A modern Julian date is the four digit year followed by the 1-based day of
the year, zero-padded to three digits (2024-12-31 is ``2024366``). The short
form keeps the last two digits of the year (``24366``), and CPA 005 stores it
behind a leading zero (``024366``).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from eftgen.core.types import JulianDate


def _as_date(value: Optional[date]) -> date:
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    return value


def to_modern_julian_date(value: Optional[date] = None) -> str:
    day = _as_date(value)
    return f"{day.year:04d}{day.timetuple().tm_yday:03d}"


def to_short_modern_julian_date(value: Optional[date] = None) -> str:
    return to_modern_julian_date(value)[-5:]


def to_julian_date(value: Optional[date] = None) -> JulianDate:
    """Six character CPA 005 date field, today when ``value`` is None."""
    return "0" + to_short_modern_julian_date(value)
