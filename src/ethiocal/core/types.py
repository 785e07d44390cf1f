from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from datetime import date
from typing import Optional


class EthiopicEra(Enum):
    """Eras of the Ethiopic calendar (Amete Mihret reckoning)."""
    BEFORE_INCARNATION = 0
    INCARNATION = 1


@dataclass(frozen=True)
class YearMonthDay:
    """Bare (year, month, day) triple; carries no validation of its own."""
    year: int
    month: int
    day: int

    def __iter__(self):
        return iter((self.year, self.month, self.day))


@dataclass(frozen=True)
class Period:
    """Amount of time in 13-month Ethiopic years, months and days."""
    years: int
    months: int
    days: int

    def total_months(self) -> int:
        return self.years * 13 + self.months


@dataclass(frozen=True)
class MonthBounds:
    year: int
    month: int
    first_epoch_day: int
    last_epoch_day: int
    first_date: Optional[date] = None  # None outside datetime.date range
    last_date: Optional[date] = None
