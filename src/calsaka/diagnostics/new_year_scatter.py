#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Tuple

import calsaka


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calsaka[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calsaka[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Saka years, March day of Chaitra 1, and the Indian leap flag."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    mday = np.empty_like(years, dtype=int)
    leap = np.zeros_like(years, dtype=bool)

    for i, Y in enumerate(years):
        d = calsaka.to_iso(int(Y), 1, 1)
        mday[i] = d.day
        leap[i] = calsaka.INDIAN.is_leap_year(int(Y))
    return years, mday, leap


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Scatter of the March day of the Indian New Year (Chaitra 1).")
    p.add_argument("--from-year", type=int, default=1800)
    p.add_argument("--to-year", type=int, default=2100)
    p.add_argument("--out", type=str, default="", help="Write the figure to this file instead of showing it.")
    p.add_argument("--dpi", type=int, default=150)
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    years, mday, leap = build_series(np, args.from_year, args.to_year)

    fig, ax = plt.subplots(figsize=(11, 4))
    ax.scatter(years[~leap], mday[~leap], s=14, marker="o", color="0.15", label="common year (22 Mar)")
    ax.scatter(years[leap], mday[leap], s=40, marker="o", facecolors="none", edgecolors="C3", label="leap year (21 Mar)")
    ax.set_xlabel("Saka year")
    ax.set_ylabel("Chaitra 1 (day of March)")
    ax.set_yticks(sorted(set(int(x) for x in np.unique(mday))))
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right", frameon=False)
    ax.set_title(f"Indian New Year, Saka {args.from_year}..{args.to_year}")
    fig.tight_layout()

    if args.out:
        fig.savefig(args.out, dpi=args.dpi)
        print(f"Wrote {args.out}")
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
