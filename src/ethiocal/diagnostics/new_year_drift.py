#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional, Tuple

import ethiocal
from ethiocal.logging import get_logger

logger = get_logger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ethiocal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ethiocal[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Gregorian day-of-year of Meskerem 1 for each Ethiopic year in the span."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(day_of_year(ethiocal.new_year_day(int(Y))))
    return years, y


def drift_per_century(np, years, doy) -> float:
    """Least-squares slope of the New Year day-of-year, in days per 100 years."""
    slope, _ = np.polyfit(years.astype(float), doy, 1)
    return float(slope) * 100.0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Scatter plot of the Gregorian day-of-year of Ethiopian New Year (Meskerem 1)."
    )
    p.add_argument("--start-year", type=int, default=1000, help="First Ethiopic year")
    p.add_argument("--end-year", type=int, default=2500, help="Last Ethiopic year")
    p.add_argument("--outbase", default="new_year_drift", help="Output base name (writes .png)")
    p.add_argument("--no-plot", action="store_true", help="Only print the fitted drift")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    x, y = build_series(np, args.start_year, args.end_year)
    drift = drift_per_century(np, x, y)
    logger.info("new_year_drift", start_year=args.start_year, end_year=args.end_year, drift=drift)
    print(f"Meskerem 1 drift: {drift:+.3f} days per century ({args.start_year}..{args.end_year} EC)")

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=6, c="tab:green", linewidths=0.0, alpha=0.5, label="Meskerem 1")
    ax.plot(x, np.polyval(np.polyfit(x.astype(float), y, 1), x), color="0.30", linewidth=1.2, label="trend")
    ax.set_xlabel("Ethiopic year")
    ax.set_ylabel("Gregorian day-of-year (Jan 1 = 1)")
    ax.set_title("Ethiopian New Year in the Gregorian calendar")
    ax.legend(loc="upper left", frameon=False)

    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
