"""Type aliases used across eftgen."""

from __future__ import annotations

CPACode = int
Cents = int
JulianDate = str  # "0" + YYDDD
Record = str  # one fixed-length physical record
