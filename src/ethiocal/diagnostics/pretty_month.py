from __future__ import annotations

import argparse
from typing import Optional

import ethiocal


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def build_weeks(Y: int, M: int) -> list[list[tuple[str, str]]]:
    """Rows of 7 (top, bottom) cells: Ethiopic day on top, Gregorian MM-DD below."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    days = ethiocal.dates_in_month(Y, M)
    pad = days[0].day_of_week - 1  # Monday=1
    for _ in range(pad):
        wk.append(cell("", ""))
    for e in days:
        g = e.to_iso_date()
        wk.append(cell(f"{e.day:2d}", f"{g.month:02d}-{g.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def ethiopic_month_calendar(Y: int, M: int, locale: Optional[str] = None) -> None:
    b = ethiocal.month_bounds(Y, M)
    name = ethiocal.EthiopicDate(Y, M, 1).month_name(locale)
    title = f"{name} {Y}  (M={M})   ({b.first_date} .. {b.last_date})"
    print_grid(title, build_weeks(Y, M))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print an Ethiopic month as a weekday grid with the Gregorian date under each day."
    )
    p.add_argument("--month", nargs=2, type=int, metavar=("Y", "M"),
                   help="Ethiopic month to print: Y M (e.g. 2016 13). Default: current month.")
    p.add_argument("--locale", choices=("en", "am"), default=None)
    args = p.parse_args(argv)

    if args.month:
        Y, M = args.month
    else:
        today = ethiocal.EthiopicDate.now()
        Y, M = today.year, today.month

    ethiopic_month_calendar(Y, M, locale=args.locale)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
