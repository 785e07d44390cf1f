from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect

from ethiocal.core.errors import EthiocalError, InvalidArgumentError
from ethiocal.logging import LOG_LEVELS, configure_logging, get_logger

logger = get_logger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise InvalidArgumentError(f"invalid Gregorian date {s!r}: {e}") from e


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_date(e, locale: str | None) -> None:
    print(f"{e.isoformat()}  {e.format(locale)}  ({e.weekday_name(locale)})")


def cmd_day(argv: list[str]) -> int:
    from ethiocal import EthiopicDate

    p = argparse.ArgumentParser(prog="ethiocal day", description="Gregorian -> Ethiopic date")
    p.add_argument("date", help="Gregorian YYYY-MM-DD")
    p.add_argument("--locale", choices=("en", "am"), default=None)
    args = p.parse_args(argv)

    logger.debug("cmd_day", date=args.date, locale=args.locale)
    _print_date(EthiopicDate.from_date(_parse_ymd(args.date)), args.locale)
    return 0


def cmd_to_greg(argv: list[str]) -> int:
    from ethiocal import EthiopicDate

    p = argparse.ArgumentParser(prog="ethiocal to-greg", description="Ethiopic -> Gregorian date")
    p.add_argument("date", help="Ethiopic YYYY-MM-DD (13th month = Pagumen)")
    args = p.parse_args(argv)

    logger.debug("cmd_to_greg", date=args.date)
    e = EthiopicDate.parse(args.date)
    print(e.to_iso_date().isoformat())
    return 0


def cmd_today(argv: list[str]) -> int:
    from ethiocal import EthiopicDate

    p = argparse.ArgumentParser(prog="ethiocal today", description="Today's Ethiopic date")
    p.add_argument("--locale", choices=("en", "am"), default=None)
    args = p.parse_args(argv)

    _print_date(EthiopicDate.now(), args.locale)
    return 0


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `ethiocal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="ethiocal", description="Ethiopic calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS)
    p.add_argument("--log-json", action="store_true", help="Emit JSON log lines")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Ethiopic date", add_help=False)
    sub.add_parser("to-greg", help="Ethiopic -> Gregorian date", add_help=False)
    sub.add_parser("today", help="Today's Ethiopic date", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print an Ethiopic month grid with Gregorian dates", add_help=False)
    sub.add_parser("new-years", help="Print Ethiopian New Year (Meskerem 1) table", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-drift"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    configure_logging(args.log_level, json_output=args.log_json)
    logger.debug("cli_dispatch", cmd=args.cmd, rest=rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "to-greg":
        return cmd_to_greg(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("ethiocal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("ethiocal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "ethiocal.diagnostics.round_trip",
            "new-year-drift": "ethiocal.diagnostics.new_year_drift",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        return _dispatch(argv)
    except EthiocalError as e:
        print(f"ethiocal: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
