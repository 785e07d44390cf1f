from __future__ import annotations

from datetime import date
import argparse

import ethiocal


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def new_year_rows(Y0: int, Y1: int) -> list[tuple[int, date, bool]]:
    """(Ethiopic year, Gregorian date of Meskerem 1, previous year was leap)."""
    return [(Y, ethiocal.new_year_day(Y), ethiocal.is_leap_year(Y - 1)) for Y in range(Y0, Y1 + 1)]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Ethiopian New Year (Enkutatash, Meskerem 1) dates in the Gregorian calendar."
    )
    p.add_argument("--from-year", type=int, default=2000, help="First Ethiopic year (default: 2000)")
    p.add_argument("--to-year", type=int, default=2030, help="Last Ethiopic year (default: 2030)")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Meskerem 1", "After leap"]
    colw = [6, 12, 10]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y, d, after_leap in new_year_rows(Y0, Y1):
        row = [str(Y).ljust(colw[0]), fmt(d).ljust(colw[1]), ("yes" if after_leap else "").ljust(colw[2])]
        print("  ".join(row).rstrip())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
