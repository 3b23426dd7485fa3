from __future__ import annotations

import argparse
import random

import calsaka
from calsaka.core.time import IsoDate


def parse_date(s: str) -> IsoDate:
    sign = -1 if s.startswith("-") else 1
    y, m, d = s.lstrip("-").split("-")
    return IsoDate(sign * int(y), int(m), int(d))


def random_date(start: IsoDate, end: IsoDate) -> IsoDate:
    e0 = start.to_epoch_day()
    return IsoDate.of_epoch_day(random.randint(e0, end.to_epoch_day()))


def roundtrip_test(N: int, start: IsoDate, end: IsoDate, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        # ISO -> Indian -> ISO
        t = calsaka.to_indian(d0)
        back = calsaka.to_iso(t.year, t.month, t.day)
        ok = back == d0

        # Indian -> ISO -> Indian, and the day-of-year path
        doy = calsaka.INDIAN.date(t.year, 1, 1).until(t, calsaka.Unit.DAYS) + 1
        ok = ok and calsaka.from_year_day(t.year, doy) == t
        ok = ok and calsaka.from_epoch_day(t.epoch_day) == t

        if not ok:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("indian:", t)
            print("back:", back)
            print("explain:", calsaka.explain(d0))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: ISO -> Indian -> ISO.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument(
        "--start",
        type=parse_date,
        default="-2000-01-01",
        help="Start date YYYY-MM-DD; pass negative years as --start=-2000-01-01.",
    )
    p.add_argument("--end", type=parse_date, default="4000-12-31", help="End date YYYY-MM-DD (--end=-0100-12-31 for negative years).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start, end = args.start, args.end

    if end < start:
        raise SystemExit("--end must be >= --start")

    print(f"Testing {args.N} dates in {start} .. {end} ...")
    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
