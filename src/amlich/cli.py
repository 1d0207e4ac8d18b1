from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect

from amlich.core.time import jdn_to_date


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _iso(jdn: int) -> str:
    d, m, y = jdn_to_date(jdn)
    return f"{y:04d}-{m:02d}-{d:02d}"


def _engine(name: str, tz: int | None):
    import amlich

    if tz is None:
        return amlich.get_engine(name)
    return amlich.get_calendar(name, time_zone=tz)


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


def cmd_day(argv: list[str]) -> int:
    import amlich  # noqa: F401  (registers built-in attributes)
    from amlich.attributes.registry import compute_attributes, list_attributes
    from dataclasses import replace

    p = argparse.ArgumentParser(prog="amlich day", description="Gregorian -> lunar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="vietnamese")
    p.add_argument("--tz", type=int, default=None, help="Override the engine time zone (hours east of UTC)")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help=f"attribute name (repeatable): {', '.join(list_attributes())}")
    args = p.parse_args(argv)

    info = _engine(args.engine, args.tz).day_info(_parse_ymd(args.date), debug=args.debug)
    if args.attr:
        info = replace(info, attributes=compute_attributes(info, args.attr))

    t = info.lunar
    leap_tag = " (leap)" if t.is_leap_month else ""
    print(f"{info.civil_date.isoformat()} -> lunar {t.day:02d}/{t.month:02d}{leap_tag}/{t.year}")
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"  {k} = {v}")
    if info.debug:
        for k, v in info.debug.items():
            print(f"  {k} = {v}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich solar", description="Lunar date -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="The leap (intercalary) occurrence of the month")
    p.add_argument("--engine", default="vietnamese")
    p.add_argument("--tz", type=int, default=None, help="Override the engine time zone (hours east of UTC)")
    args = p.parse_args(argv)

    eng = _engine(args.engine, args.tz)
    d = eng.to_gregorian(amlich.LunarDate(args.year, args.month, args.day, args.leap))
    print(d.isoformat())
    return 0


def cmd_year(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich year", description="List the months of a lunar year")
    p.add_argument("year", type=int)
    p.add_argument("--engine", default="vietnamese")
    args = p.parse_args(argv)

    print(f"Lunar year {args.year}  (engine={args.engine})")
    print("Month   First        Last         Days")
    for rec in amlich.months_in_year(args.year, engine=args.engine):
        label = f"{rec['M']:>2}{'L' if rec['is_leap_month'] else ' '}"
        print(f"{label:<7} {_iso(rec['first_jdn'])}   {_iso(rec['last_jdn'])}   {rec['days']}")
    return 0


def cmd_sun(argv: list[str]) -> int:
    import math
    from amlich.reference import solar

    p = argparse.ArgumentParser(prog="amlich sun", description="Solar longitude and sector at a Julian Date.")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Date (default: J2000.0 = 2451545.0)")
    p.add_argument("--tz", type=int, default=7, help="Time zone for the sector of civil day floor(jd+0.5)")
    args = p.parse_args(argv)

    L = solar.sun_longitude(args.jd)
    day_number = math.floor(args.jd + 0.5)
    print(f"JD = {args.jd:.6f}")
    print(f"  Longitude = {L:.8f} rad = {math.degrees(L):.6f} deg")
    print(f"  Sector of JDN {day_number} (UTC+{args.tz}) = {solar.sun_longitude_sector(day_number, args.tz)}")
    return 0


def cmd_moon(argv: list[str]) -> int:
    from amlich.reference import lunar

    p = argparse.ArgumentParser(prog="amlich moon", description="Time of the k-th New Moon after 1900-01-01.")
    p.add_argument("--k", type=int, default=0, help="Lunation index (0 = January 1900)")
    p.add_argument("--tz", type=int, default=7, help="Time zone for the local civil day")
    args = p.parse_args(argv)

    jd = lunar.new_moon(args.k)
    jdn = lunar.new_moon_day(args.k, args.tz)
    d, m, y = jdn_to_date(jdn)
    print(f"k = {args.k}")
    print(f"  JD (UT)         = {jd:.6f}")
    print(f"  Local day (JDN) = {jdn}  ->  {y:04d}-{m:02d}-{d:02d} (UTC+{args.tz})")
    return 0


def main(argv: list[str] | None = None) -> int:
    from amlich.core.errors import AmlichError

    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except AmlichError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyError as e:
        # unknown engine or attribute name
        print(f"error: {e.args[0]}", file=sys.stderr)
        return 1


def _dispatch(argv: list[str]) -> int:
    # Shorthand: `amlich YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="amlich", description="Vietnamese lunar calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunar day label", add_help=False)
    sub.add_parser("solar", help="Lunar -> Gregorian date", add_help=False)
    sub.add_parser("year", help="List the months of a lunar year", add_help=False)
    sub.add_parser("sun", help="Solar longitude at a Julian Date", add_help=False)
    sub.add_parser("moon", help="New Moon time for a lunation index", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars", add_help=False)
    sub.add_parser("new-years", help="Print New Year (Tết) table", add_help=False)
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-months"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "solar": cmd_solar,
        "year": cmd_year,
        "sun": cmd_sun,
        "moon": cmd_moon,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_module_main("amlich.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("amlich.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "amlich.diagnostics.round_trip",
            "leap-months": "amlich.diagnostics.leap_months",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
