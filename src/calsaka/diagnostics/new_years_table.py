from __future__ import annotations

import argparse
from typing import List, Tuple

import calsaka
from calsaka.core.time import IsoDate


def mmdd(d: IsoDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def new_year_rows(from_year: int, to_year: int) -> List[Tuple[int, IsoDate, bool]]:
    """(Indian year, ISO date of Chaitra 1, Indian leap year) for each year in the span."""
    rows = []
    for Y in range(from_year, to_year + 1):
        rows.append((Y, calsaka.to_iso(Y, 1, 1), calsaka.INDIAN.is_leap_year(Y)))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the ISO date of the Indian New Year (Chaitra 1) for a span of Saka years."
    )
    p.add_argument("--from-year", type=int, default=1930)
    p.add_argument("--to-year", type=int, default=1960)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format of the ISO column (default: mmdd).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: IsoDate) -> str:
        return mmdd(d) if args.dates == "mmdd" else str(d)

    headers = ["Saka", "ISO", "Leap", "Chaitra"]
    colw = [6, 11, 5, 7]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y, d, leap in new_year_rows(Y0, Y1):
        row = [str(Y), fmt(d), "L" if leap else "", "31" if leap else "30"]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
