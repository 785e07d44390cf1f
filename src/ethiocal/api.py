from __future__ import annotations

from datetime import date
from typing import List, Optional

from ethiocal.core.clock import Clock
from ethiocal.core.errors import InvalidArgumentError, out_of_range
from ethiocal.core.time import epoch_day_to_date
from ethiocal.core.types import MonthBounds
from ethiocal.date import EthiopicDate
from ethiocal.engines import rules
from ethiocal.engines.constants import DAYS_PER_REGULAR_MONTH, MONTHS_PER_YEAR, PAGUMEN

# ============================================================
# Gregorian <-> Ethiopic shortcuts
# ============================================================

def to_gregorian(year: int, month: int, day: int) -> date:
    return EthiopicDate(year, month, day).to_iso_date()

def from_gregorian(d: date) -> EthiopicDate:
    return EthiopicDate.from_date(d)

def new_year_day(year: int) -> date:
    """Gregorian date of Meskerem 1 (Enkutatash) of the given Ethiopic year."""
    return to_gregorian(year, 1, 1)

def month_bounds(year: int, month: int, *, as_date: bool = True) -> MonthBounds:
    first = rules.to_epoch_day(year, month, 1)
    last = first + rules.days_in_month(year, month) - 1
    first_date = last_date = None
    if as_date:
        first_date = epoch_day_to_date(first)
        last_date = epoch_day_to_date(last)
    return MonthBounds(year, month, first, last, first_date, last_date)

# ============================================================
# Month / year boundaries
# ============================================================

def first_day_of_month(d: EthiopicDate) -> EthiopicDate:
    return EthiopicDate(d.year, d.month, 1)

def last_day_of_month(d: EthiopicDate) -> EthiopicDate:
    return EthiopicDate(d.year, d.month, rules.days_in_month(d.year, d.month))

def first_day_of_year(d: EthiopicDate) -> EthiopicDate:
    return EthiopicDate(d.year, 1, 1)

def last_day_of_year(d: EthiopicDate) -> EthiopicDate:
    return EthiopicDate(d.year, PAGUMEN, rules.days_in_month(d.year, PAGUMEN))

def dates_in_month(year: int, month: int) -> List[EthiopicDate]:
    return [EthiopicDate(year, month, day) for day in range(1, rules.days_in_month(year, month) + 1)]

def dates_in_year(year: int) -> List[EthiopicDate]:
    out: List[EthiopicDate] = []
    for month in range(1, MONTHS_PER_YEAR + 1):
        out.extend(dates_in_month(year, month))
    return out

# ============================================================
# Comparisons and intervals
# ============================================================

def is_same_month(a: EthiopicDate, b: EthiopicDate) -> bool:
    return a.year == b.year and a.month == b.month

def is_same_year(a: EthiopicDate, b: EthiopicDate) -> bool:
    return a.year == b.year

def months_between(a: EthiopicDate, b: EthiopicDate) -> int:
    """Calendar-month difference; ignores the day of month. Positive when b is later."""
    return (b.year - a.year) * MONTHS_PER_YEAR + (b.month - a.month)

def years_between(a: EthiopicDate, b: EthiopicDate) -> int:
    return b.year - a.year

def days_between(a: EthiopicDate, b: EthiopicDate) -> int:
    return a.days_until(b)

# ============================================================
# Leap years
# ============================================================

def leap_years_in_range(start_year: int, end_year: int) -> List[int]:
    """Leap years in start_year..end_year, both inclusive."""
    return [y for y in range(start_year, end_year + 1) if rules.is_leap_year(y)]

def next_leap_year(year: int) -> int:
    """First leap year strictly after ``year``."""
    return year + 1 + (3 - (year + 1)) % 4

def previous_leap_year(year: int) -> int:
    """Last leap year strictly before ``year``."""
    return year - 1 - ((year - 1) - 3) % 4

# ============================================================
# Ages and recurring days
# ============================================================

def calculate_age(birth: EthiopicDate, current: EthiopicDate) -> int:
    """Completed years; the birthday counts as reached on the day itself."""
    age = current.year - birth.year
    if (current.month, current.day) < (birth.month, birth.day):
        age -= 1
    return age

def current_age(birth: EthiopicDate, *, clock: Optional[Clock] = None) -> int:
    return calculate_age(birth, EthiopicDate.now(clock))

def next_day_of_month(d: EthiopicDate, target_day: int) -> EthiopicDate:
    """
    First date strictly after ``d`` whose day of month is ``target_day``.
    Months too short for the target (Pagumen) are skipped.
    """
    if not isinstance(target_day, int) or isinstance(target_day, bool):
        raise InvalidArgumentError(f"target day must be an int, got {type(target_day).__name__}")
    if not 1 <= target_day <= DAYS_PER_REGULAR_MONTH:
        raise out_of_range("target day", target_day, 1, DAYS_PER_REGULAR_MONTH)

    if d.day < target_day <= d.length_of_month:
        return EthiopicDate(d.year, d.month, target_day)

    y, m = rules.add_months(d.year, d.month, 1)
    while rules.days_in_month(y, m) < target_day:
        y, m = rules.add_months(y, m, 1)
    return EthiopicDate(y, m, target_day)
