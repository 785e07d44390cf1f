from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import ethiocal
from ethiocal.logging import get_logger, timed_block

logger = get_logger(__name__)


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        e = ethiocal.from_gregorian(d0)
        back = e.to_iso_date()
        same = ethiocal.EthiopicDate(e.year, e.month, e.day)
        if back != d0 or same != e or e.to_epoch_day() != (d0 - date(1970, 1, 1)).days:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("ethiopic:", e)
            print("back:", back)
            print("epoch day:", e.to_epoch_day())
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> ethiopic -> gregorian.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default="0001-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start, end = parse_date(args.start), parse_date(args.end)
    with timed_block(logger, "round_trip", level="info"):
        failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)

    print(f"round-trip: N={args.N}  range={start}..{end}  failures={failures}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
