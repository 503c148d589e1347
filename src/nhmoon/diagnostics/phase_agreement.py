#!/usr/bin/env python3
"""
Compare the periodic phase model with NetHack's epact-based one, year by
year: share of days classified identically and number of highlighted days.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from nhmoon.core.dates import to_ordinal
from nhmoon.core.types import CalendarDate, MoonPhase
from nhmoon.engines.moon import NetHackPhaseModel, default_periodic_model

_CODES = {MoonPhase.NONE: 0, MoonPhase.NEW: 1, MoonPhase.FULL: 2}


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "nhmoon[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "nhmoon[diagnostics]"') from e


def year_codes(np, model, year: int):
    lo = to_ordinal(CalendarDate(year, 1, 1))
    hi = to_ordinal(CalendarDate(year, 12, 31))
    return np.array([_CODES[model.phase_of(o)] for o in range(lo, hi + 1)], dtype=np.int8)


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray", "np.ndarray"]:
    periodic = default_periodic_model()
    nethack = NetHackPhaseModel()

    years = np.arange(start_year, end_year + 1, dtype=int)
    agree = np.empty_like(years, dtype=float)
    lit_periodic = np.empty_like(years)
    lit_nethack = np.empty_like(years)

    for i, Y in enumerate(years):
        a = year_codes(np, periodic, int(Y))
        b = year_codes(np, nethack, int(Y))
        agree[i] = float(np.mean(a == b))
        lit_periodic[i] = int(np.count_nonzero(a))
        lit_nethack[i] = int(np.count_nonzero(b))

    return years, agree, lit_periodic, lit_nethack


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Agreement between the periodic and NetHack phase models.")
    p.add_argument("--start-year", type=int, default=2000)
    p.add_argument("--end-year", type=int, default=2050)
    p.add_argument("--plot", action="store_true", help="Save a plot instead of only printing the table")
    p.add_argument("--outbase", default="phase_agreement", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    years, agree, lit_p, lit_n = build_series(np, args.start_year, args.end_year)

    print(f"{'year':>6}  {'agree':>6}  {'periodic':>8}  {'nethack':>7}")
    for Y, a, lp, ln in zip(years, agree, lit_p, lit_n):
        print(f"{int(Y):>6}  {a:6.3f}  {int(lp):>8}  {int(ln):>7}")
    print(f"mean agreement: {float(np.mean(agree)):.4f}")

    if args.plot:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
        ax.set_axisbelow(True)
        ax.grid(True, which="major", color="0.88", linewidth=0.7)
        ax.plot(years, agree, color="tab:blue", linewidth=1.4)
        ax.set_xlabel("Year")
        ax.set_ylabel("Share of days classified alike")
        ax.set_title("Periodic vs NetHack moon phases")
        fig.savefig(args.outbase + ".png", dpi=300)
        print(f"Saved: {args.outbase}.png")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
