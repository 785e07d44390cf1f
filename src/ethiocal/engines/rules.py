"""
ethiocal.engines.rules
----------------------
Pure arithmetic of the Ethiopic calendar. Every function here works on plain
integers and (year, month, day) triples; nothing holds state.

All cross-calendar work goes through the ISO epoch day:

    ethiopic_day = (year - 1) * 365 + year // 4 + day_of_year - 1
    epoch_day    = ethiopic_day - EPOCH_OFFSET

Python's ``//`` and ``%`` already floor toward negative infinity, so negative
years and epoch days far before 1970 need no special handling.
"""

from __future__ import annotations

from typing import Tuple

from ethiocal.core.errors import InvalidArgumentError, out_of_range
from ethiocal.core.types import YearMonthDay
from ethiocal.engines.constants import (
    DAYS_PER_CYCLE,
    DAYS_PER_REGULAR_MONTH,
    DAYS_PER_YEAR_LEAP,
    DAYS_PER_YEAR_NORMAL,
    EPOCH_OFFSET,
    LEAP_YEAR_CYCLE,
    MONTHS_PER_YEAR,
    PAGUMEN,
    PAGUMEN_DAYS_LEAP,
    PAGUMEN_DAYS_NORMAL,
)


def _check_int(name: str, value: int) -> None:
    # bool is an int subclass; reject it along with floats and strings.
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")


def is_leap_year(year: int) -> bool:
    """Leap iff year ≡ 3 (mod 4). No century correction."""
    return year % LEAP_YEAR_CYCLE == 3


def check_month(month: int) -> None:
    _check_int("month", month)
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise out_of_range("month", month, 1, MONTHS_PER_YEAR)


def days_in_month(year: int, month: int) -> int:
    check_month(month)
    if month < PAGUMEN:
        return DAYS_PER_REGULAR_MONTH
    return PAGUMEN_DAYS_LEAP if is_leap_year(year) else PAGUMEN_DAYS_NORMAL


def days_in_year(year: int) -> int:
    return DAYS_PER_YEAR_LEAP if is_leap_year(year) else DAYS_PER_YEAR_NORMAL


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Predicate form of validate_date(); never raises."""
    for v in (year, month, day):
        if not isinstance(v, int) or isinstance(v, bool):
            return False
    if not 1 <= month <= MONTHS_PER_YEAR:
        return False
    return 1 <= day <= days_in_month(year, month)


def validate_date(year: int, month: int, day: int) -> None:
    """
    Raise InvalidArgumentError naming the first violated bound.
    This is the single place the leap-aware Pagumen bound is enforced.
    """
    _check_int("year", year)
    check_month(month)
    _check_int("day", day)
    hi = days_in_month(year, month)
    if not 1 <= day <= hi:
        raise out_of_range("day", day, 1, hi, f"for month {month} of year {year}")


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp day to the length of (year, month). Used by month/year arithmetic."""
    return min(day, days_in_month(year, month))


def day_of_year(month: int, day: int) -> int:
    return (month - 1) * DAYS_PER_REGULAR_MONTH + day


def month_and_day_from_day_of_year(doy: int, year: int | None = None) -> Tuple[int, int]:
    """
    Inverse of day_of_year(). The 30-day divisor is applied uniformly, month 13
    included, so the result is only meaningful when doy fits the year. Pass
    ``year`` to have that checked; without it the range checked is 1..366.
    """
    _check_int("day of year", doy)
    hi = days_in_year(year) if year is not None else DAYS_PER_YEAR_LEAP
    if not 1 <= doy <= hi:
        ctx = f"for year {year}" if year is not None else ""
        raise out_of_range("day of year", doy, 1, hi, ctx)
    return (doy - 1) // DAYS_PER_REGULAR_MONTH + 1, (doy - 1) % DAYS_PER_REGULAR_MONTH + 1


def start_of_year(year: int) -> int:
    """Ethiopic day count (not epoch day) of Meskerem 1 of ``year``, 0-based."""
    return (year - 1) * DAYS_PER_YEAR_NORMAL + year // LEAP_YEAR_CYCLE


def to_epoch_day(year: int, month: int, day: int) -> int:
    """(year, month, day) -> ISO epoch day. Components are not validated here."""
    return start_of_year(year) + day_of_year(month, day) - 1 - EPOCH_OFFSET


def from_epoch_day(epoch_day: int) -> YearMonthDay:
    _check_int("epoch day", epoch_day)
    shifted = epoch_day + EPOCH_OFFSET
    year = (shifted * 4 + 1463) // DAYS_PER_CYCLE
    doy0 = shifted - start_of_year(year)
    return YearMonthDay(year, doy0 // DAYS_PER_REGULAR_MONTH + 1, doy0 % DAYS_PER_REGULAR_MONTH + 1)


def plus_days(ymd: Tuple[int, int, int], n: int) -> YearMonthDay:
    y, m, d = ymd
    return from_epoch_day(to_epoch_day(y, m, d) + n)


def days_between(a: Tuple[int, int, int], b: Tuple[int, int, int]) -> int:
    """Positive when b is after a."""
    return to_epoch_day(*b) - to_epoch_day(*a)


def add_months(year: int, month: int, n: int) -> Tuple[int, int]:
    """Shift (year, month) by n months, carrying into the year."""
    total = year * MONTHS_PER_YEAR + (month - 1) + n
    return total // MONTHS_PER_YEAR, total % MONTHS_PER_YEAR + 1


def day_of_week(epoch_day: int) -> int:
    """ISO weekday, Monday=1 .. Sunday=7. Epoch day 0 was a Thursday."""
    return (epoch_day + 3) % 7 + 1
