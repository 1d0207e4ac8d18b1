from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import amlich
from amlich.core.time import jdn_to_date


def iso_label(jdn: int) -> str:
    d, m, y = jdn_to_date(jdn)
    return f"{y:04d}-{m:02d}-{d:02d}"


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def week_rows(first_weekday: int, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first_weekday)]  # Monday=0
    for top, bot in days:
        wk.append(cell(top, bot))
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


def lunar_month_calendar(engine: str, Y: int, M: int, is_leap: bool) -> None:
    b = amlich.month_bounds(Y, M, is_leap_month=is_leap, engine=engine, as_date=False)
    eng = amlich.get_engine(engine)

    # Walk JDNs: before 1582 the civil labels are Julian and may not fit a `date`
    days = []
    for jdn in range(b["first_jdn"], b["last_jdn"] + 1):
        gd, gm, _ = jdn_to_date(jdn)
        days.append((f"{eng.from_jdn(jdn)['day']:2d}", f"{gm:02d}-{gd:02d}"))

    leap_tag = "L" if is_leap else ""
    span = f"{iso_label(b['first_jdn'])} .. {iso_label(b['last_jdn'])}"
    # JDN 0 was a Monday
    print_grid(f"{engine} lunar month  Y={Y}  M={M}{leap_tag}   ({span})", week_rows(b["first_jdn"] % 7, days))


def gregorian_month_calendar(engine: str, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    days = []
    d = first
    while d <= last:
        t = amlich.day_info(d, engine=engine).lunar
        leap_tag = "L" if t.is_leap_month else ""
        days.append((f"{d.day:2d}", f"{t.month:02d}{leap_tag}-{t.day:02d}"))
        d += timedelta(days=1)

    print_grid(f"{engine} Gregorian month  {gy}-{gm:02d}", week_rows(first.weekday(), days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--engine", default="vietnamese")
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2025 6)")
    p.add_argument("--leap", action="store_true",
                   help="If set, lunar month is the leap instance.")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 7)")
    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        today = date.today()
        gregorian_month_calendar(args.engine, gy=today.year, gm=today.month)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(args.engine, Y=Y, M=M, is_leap=args.leap)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy=gy, gm=gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
