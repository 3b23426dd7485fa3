from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect

from calsaka.core.errors import CalsakaError
from calsaka.core.log import configure_logging, get_logger

log = get_logger(__name__)

_DATE_RE = re.compile(r"^-?\d{4,}-\d{2}-\d{2}$")


def _parse_ymd(s: str):
    from calsaka.core.time import IsoDate

    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return IsoDate(sign * y, m, d)


def _protect_dates(argv: list[str]) -> list[str]:
    """Let argparse take negative-year dates (e.g. -0079-10-11) as positionals."""
    if any(a.startswith("-") and _DATE_RE.match(a) for a in argv):
        return ["--", *argv]
    return argv


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """Run a diagnostics module's main(), passing argv only when main() takes arguments."""
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


def _print_indian(t) -> None:
    print(f"{t}  era={t.era.name}  year_of_era={t.year_of_era}  epoch_day={t.epoch_day}")


def cmd_day(argv: list[str]) -> int:
    import calsaka

    p = argparse.ArgumentParser(prog="calsaka day", description="ISO -> Indian date")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    args = p.parse_args(_protect_dates(argv))

    _print_indian(calsaka.to_indian(args.date))
    return 0


def cmd_iso(argv: list[str]) -> int:
    import calsaka

    p = argparse.ArgumentParser(prog="calsaka iso", description="Indian -> ISO date")
    p.add_argument("year", type=int, help="Indian proleptic year")
    p.add_argument("month", type=int, help="1..12")
    p.add_argument("day", type=int, help="1..31")
    args = p.parse_args(argv)

    print(calsaka.to_iso(args.year, args.month, args.day))
    return 0


def cmd_year_day(argv: list[str]) -> int:
    import calsaka

    p = argparse.ArgumentParser(prog="calsaka year-day", description="Indian (year, day-of-year) -> Indian date")
    p.add_argument("year", type=int, help="Indian proleptic year")
    p.add_argument("day_of_year", type=int, help="1..365/366")
    args = p.parse_args(argv)

    t = calsaka.from_year_day(args.year, args.day_of_year)
    _print_indian(t)
    print(f"iso={t.to_iso_date()}")
    return 0


def cmd_epoch_day(argv: list[str]) -> int:
    import calsaka

    p = argparse.ArgumentParser(prog="calsaka epoch-day", description="Indian epoch day -> Indian date")
    p.add_argument("epoch_day", type=int, help="day 0 is Indian 0000-01-01 (ISO 0078-03-22)")
    args = p.parse_args(argv)

    t = calsaka.from_epoch_day(args.epoch_day)
    _print_indian(t)
    print(f"iso={t.to_iso_date()}")
    return 0


def cmd_explain(argv: list[str]) -> int:
    import calsaka

    p = argparse.ArgumentParser(prog="calsaka explain", description="Show the steps of an ISO -> Indian conversion")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    args = p.parse_args(_protect_dates(argv))

    for k, v in calsaka.explain(args.date).items():
        print(f"{k:18s} {v}")
    return 0


_COMMANDS = {
    "day": cmd_day,
    "iso": cmd_iso,
    "year-day": cmd_year_day,
    "epoch-day": cmd_epoch_day,
    "explain": cmd_explain,
}


def _dispatch(cmd: str, argv: list[str]) -> int:
    try:
        return _COMMANDS[cmd](argv)
    except CalsakaError as e:
        log.info("cli.failed", cmd=cmd, error=type(e).__name__)
        print(f"calsaka {cmd}: error: {e}", file=sys.stderr)
        return 2


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Backward compatibility: `calsaka YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        configure_logging()
        return _dispatch("day", argv)

    p = argparse.ArgumentParser(prog="calsaka", description="Indian National (Saka) calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="ISO -> Indian date", add_help=False)
    sub.add_parser("iso", help="Indian -> ISO date", add_help=False)
    sub.add_parser("year-day", help="Indian (year, day-of-year) -> Indian date", add_help=False)
    sub.add_parser("epoch-day", help="Indian epoch day -> Indian date", add_help=False)
    sub.add_parser("explain", help="Show the steps of an ISO -> Indian conversion", add_help=False)

    # diagnostics
    sub.add_parser("new-years", help="Print the Indian New Year table (diagnostics)", add_help=False)
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    configure_logging(args.log_level)

    if args.cmd in _COMMANDS:
        return _dispatch(args.cmd, rest)

    if args.cmd == "new-years":
        return _run_module_main("calsaka.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calsaka.diagnostics.round_trip",
            "new-year-scatter": "calsaka.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
