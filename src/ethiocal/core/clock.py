from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from .time import date_to_epoch_day


class Clock(Protocol):
    def today_epoch_day(self) -> int: ...


class SystemClock:
    """Host clock in the local timezone."""

    def today_epoch_day(self) -> int:
        return date_to_epoch_day(date.today())

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to one epoch day. Used by tests and reproducible scripts."""
    epoch_day: int

    @classmethod
    def at(cls, d: date) -> "FixedClock":
        return cls(date_to_epoch_day(d))

    def today_epoch_day(self) -> int:
        return self.epoch_day
