"""
ethiocal.range
--------------
Inclusive ranges of Ethiopic dates. Iteration is lazy and restartable:
every ``iter()`` starts again from ``start``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from ethiocal.core.errors import InvalidArgumentError
from ethiocal.date import EthiopicDate


def check_step(step: int) -> int:
    if not isinstance(step, int) or isinstance(step, bool):
        raise InvalidArgumentError(f"step must be an int, got {type(step).__name__}")
    if step <= 0:
        raise InvalidArgumentError(f"step {step} out of range (valid >= 1)")
    return step


def _walk(start: EthiopicDate, end: EthiopicDate, step: int) -> Iterator[EthiopicDate]:
    last = end.to_epoch_day()
    n = start.to_epoch_day()
    while n <= last:
        yield EthiopicDate.from_epoch_day(n)
        n += step


@dataclass(frozen=True)
class SteppedRange:
    """Every ``step``-th day of a range, always beginning at its start."""
    base: EthiopicDateRange
    step: int

    def __post_init__(self) -> None:
        check_step(self.step)

    def __iter__(self) -> Iterator[EthiopicDate]:
        return _walk(self.base.start, self.base.end, self.step)

    def __len__(self) -> int:
        days = self.base.length_in_days()
        return 0 if days == 0 else (days - 1) // self.step + 1


@dataclass(frozen=True)
class EthiopicDateRange:
    """
    Closed range ``start..end``. Empty when ``start > end``.

    >>> r = EthiopicDateRange(EthiopicDate(2016, 1, 1), EthiopicDate(2016, 1, 10))
    >>> [d.day for d in r.step(3)]
    [1, 4, 7, 10]
    """
    start: EthiopicDate
    end: EthiopicDate

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            v = getattr(self, name)
            if not isinstance(v, EthiopicDate):
                raise InvalidArgumentError(f"range {name} must be an EthiopicDate, got {type(v).__name__}")

    def __iter__(self) -> Iterator[EthiopicDate]:
        return _walk(self.start, self.end, 1)

    def iterate(self) -> Iterator[EthiopicDate]:
        return iter(self)

    def step(self, days: int) -> Iterable[EthiopicDate]:
        return SteppedRange(self, days)

    def length_in_days(self) -> int:
        return max(self.start.days_until(self.end) + 1, 0)

    def __len__(self) -> int:
        return self.length_in_days()

    def is_empty(self) -> bool:
        return self.start > self.end

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, EthiopicDate):
            return False
        return self.start <= value <= self.end

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"
