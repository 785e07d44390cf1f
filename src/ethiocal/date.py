"""
ethiocal.date
-------------
Immutable Ethiopic date value. Validation happens once, at construction;
all arithmetic goes through the rules engine and returns new values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from functools import total_ordering
from typing import TYPE_CHECKING, Optional

from ethiocal.config import check_locale, get_config
from ethiocal.core.clock import Clock
from ethiocal.core.errors import InvalidArgumentError
from ethiocal.core.time import date_to_epoch_day, epoch_day_to_date, iso_to_epoch_day
from ethiocal.core.types import EthiopicEra, Period
from ethiocal.engines import rules
from ethiocal.engines.constants import MONTH_NAMES, WEEKDAY_NAMES

if TYPE_CHECKING:
    from ethiocal.range import EthiopicDateRange

_PARSE_RE = re.compile(r"^\s*(-?\d+)-(\d{1,2})-(\d{1,2})\s*$")


@total_ordering
@dataclass(frozen=True)
class EthiopicDate:
    """
    A day in the proleptic Ethiopic calendar.

    ``year`` may be zero or negative. ``month`` is 1..13 where 13 is Pagumen,
    which has 5 days, or 6 in a leap year (year % 4 == 3).

    >>> EthiopicDate.of(2016, 3, 15).format()
    '15 Hidar 2016'
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        rules.validate_date(self.year, self.month, self.day)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> EthiopicDate:
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> EthiopicDate:
        m, d = rules.month_and_day_from_day_of_year(day_of_year, year)
        return cls(year, m, d)

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> EthiopicDate:
        return cls(*rules.from_epoch_day(epoch_day))

    @classmethod
    def from_iso(cls, year: int, month: int, day: int) -> EthiopicDate:
        return cls.from_epoch_day(iso_to_epoch_day(year, month, day))

    @classmethod
    def from_date(cls, d: date) -> EthiopicDate:
        return cls.from_epoch_day(date_to_epoch_day(d))

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> EthiopicDate:
        clock = clock if clock is not None else get_config().clock
        return cls.from_epoch_day(clock.today_epoch_day())

    @classmethod
    def parse(cls, text: str) -> EthiopicDate:
        """Parse ``YYYY-MM-DD`` (year may carry a leading minus)."""
        m = _PARSE_RE.match(text)
        if m is None:
            raise InvalidArgumentError(f"cannot parse {text!r} as an Ethiopic date, expected YYYY-MM-DD")
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    # ---------------------------------------------------------
    # Derived fields
    # ---------------------------------------------------------

    @property
    def day_of_year(self) -> int:
        return rules.day_of_year(self.month, self.day)

    @property
    def is_leap_year(self) -> bool:
        return rules.is_leap_year(self.year)

    @property
    def length_of_month(self) -> int:
        return rules.days_in_month(self.year, self.month)

    @property
    def length_of_year(self) -> int:
        return rules.days_in_year(self.year)

    @property
    def era(self) -> EthiopicEra:
        return EthiopicEra.INCARNATION if self.year >= 1 else EthiopicEra.BEFORE_INCARNATION

    @property
    def year_of_era(self) -> int:
        return self.year if self.year >= 1 else 1 - self.year

    @property
    def day_of_week(self) -> int:
        """ISO weekday: Monday=1 .. Sunday=7."""
        return rules.day_of_week(self.to_epoch_day())

    def month_name(self, locale: Optional[str] = None) -> str:
        locale = check_locale(locale or get_config().default_locale)
        return MONTH_NAMES[locale][self.month - 1]

    def weekday_name(self, locale: Optional[str] = None) -> str:
        locale = check_locale(locale or get_config().default_locale)
        return WEEKDAY_NAMES[locale][self.day_of_week - 1]

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def to_epoch_day(self) -> int:
        return rules.to_epoch_day(self.year, self.month, self.day)

    def to_iso_date(self) -> date:
        return epoch_day_to_date(self.to_epoch_day())

    to_date = to_iso_date

    def isoformat(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    def format(self, locale: Optional[str] = None) -> str:
        """``"{day} {month name} {year}"``, e.g. ``"15 Hidar 2016"``."""
        return f"{self.day} {self.month_name(locale)} {self.year}"

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def plus_days(self, n: int) -> EthiopicDate:
        if n == 0:
            return self
        return EthiopicDate(*rules.plus_days((self.year, self.month, self.day), n))

    def minus_days(self, n: int) -> EthiopicDate:
        return self.plus_days(-n)

    def plus_weeks(self, n: int) -> EthiopicDate:
        return self.plus_days(7 * n)

    def minus_weeks(self, n: int) -> EthiopicDate:
        return self.plus_weeks(-n)

    def plus_months(self, n: int) -> EthiopicDate:
        """Add n months; the day is clamped to the target month, never rolled over."""
        if n == 0:
            return self
        y, m = rules.add_months(self.year, self.month, n)
        return EthiopicDate(y, m, rules.clamp_day(y, m, self.day))

    def minus_months(self, n: int) -> EthiopicDate:
        return self.plus_months(-n)

    def plus_years(self, n: int) -> EthiopicDate:
        """Add n years; Pagumen 6 clamps to Pagumen 5 in a common year."""
        if n == 0:
            return self
        y = self.year + n
        return EthiopicDate(y, self.month, rules.clamp_day(y, self.month, self.day))

    def minus_years(self, n: int) -> EthiopicDate:
        return self.plus_years(-n)

    def days_until(self, other: EthiopicDate) -> int:
        return rules.days_between((self.year, self.month, self.day), (other.year, other.month, other.day))

    def _proleptic_month(self) -> int:
        return self.year * 13 + self.month - 1

    def months_until(self, other: EthiopicDate) -> int:
        """Complete months from self to other, truncated toward zero."""
        packed1 = self._proleptic_month() * 256 + self.day
        packed2 = other._proleptic_month() * 256 + other.day
        diff = packed2 - packed1
        return diff // 256 if diff >= 0 else -((-diff) // 256)

    def period_until(self, other: EthiopicDate) -> Period:
        total_months = other._proleptic_month() - self._proleptic_month()
        days = other.day - self.day
        if total_months > 0 and days < 0:
            total_months -= 1
            days = other.to_epoch_day() - self.plus_months(total_months).to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= other.length_of_month
        years = abs(total_months) // 13 * (1 if total_months >= 0 else -1)
        return Period(years, total_months - years * 13, days)

    def range_to(self, end: EthiopicDate) -> "EthiopicDateRange":
        from ethiocal.range import EthiopicDateRange
        return EthiopicDateRange(self, end)

    # ---------------------------------------------------------
    # Ordering
    # ---------------------------------------------------------

    def compare(self, other: EthiopicDate) -> int:
        """-1, 0 or 1 by epoch day."""
        diff = self.to_epoch_day() - other.to_epoch_day()
        return (diff > 0) - (diff < 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EthiopicDate):
            return NotImplemented
        return self.compare(other) < 0

    def __add__(self, other: object) -> EthiopicDate:
        if isinstance(other, int) and not isinstance(other, bool):
            return self.plus_days(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object):
        if isinstance(other, EthiopicDate):
            return other.days_until(self)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.minus_days(other)
        return NotImplemented

