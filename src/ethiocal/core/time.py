"""
ethiocal.core.time
------------------
Gregorian side of the conversion. Everything here speaks ISO epoch days
(days since 1970-01-01, proleptic Gregorian), the shared currency with the
Ethiopic rules engine.
"""

from __future__ import annotations
from datetime import date
from typing import Tuple

from .errors import InvalidArgumentError

# Julian Day Number of 1970-01-01.
JDN_UNIX_EPOCH = 2440588


def to_jdn(y: int, m: int, day: int) -> int:
    """Convert proleptic Gregorian (y, m, d) to Julian Day Number (JDN)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def iso_to_epoch_day(y: int, m: int, d: int) -> int:
    """ISO (y, m, d) -> epoch day. Validated through datetime.date."""
    try:
        date(y, m, d)
    except (ValueError, OverflowError, TypeError) as e:
        raise InvalidArgumentError(f"invalid ISO date {y}-{m}-{d}: {e}") from e
    return to_jdn(y, m, d) - JDN_UNIX_EPOCH


def epoch_day_to_iso(epoch_day: int) -> Tuple[int, int, int]:
    """Epoch day -> proleptic Gregorian (y, m, d). No range limit."""
    return from_jdn(epoch_day + JDN_UNIX_EPOCH)


def date_to_epoch_day(d: date) -> int:
    return to_jdn(d.year, d.month, d.day) - JDN_UNIX_EPOCH


def epoch_day_to_date(epoch_day: int) -> date:
    y, m, d = epoch_day_to_iso(epoch_day)
    try:
        return date(y, m, d)
    except ValueError as e:
        raise InvalidArgumentError(
            f"epoch day {epoch_day} maps to ISO year {y}, outside datetime.date range (valid 1..9999)"
        ) from e
