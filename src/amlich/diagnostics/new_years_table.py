from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import amlich


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_time_zones(arg: str) -> List[Tuple[str, int]]:
    """
    Parse the time zone columns from the CLI.
    Example:
      --time-zones "VN=7,CN=8"
    Bare numbers get a "UTC+N" header:
      --time-zones "7,8"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, int]] = []
    for it in items:
        if "=" in it:
            name, tz = it.split("=", 1)
            out.append((name.strip(), int(tz)))
        else:
            out.append((f"UTC+{int(it)}", int(it)))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the New Year (Tết) date table, optionally for several time zones."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--engine", default="vietnamese")
    p.add_argument(
        "--time-zones",
        type=str,
        default="",
        help='Comma list like "VN=7,CN=8" (default: the engine\'s own time zone).',
    )
    p.add_argument("--dates", choices=("mmdd", "iso"), default="mmdd")
    args = p.parse_args(argv)

    if args.time_zones:
        engines = [(name, amlich.get_calendar(args.engine, time_zone=tz)) for name, tz in parse_time_zones(args.time_zones)]
    else:
        engines = [(args.engine, amlich.get_calendar(args.engine))]

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in engines]
    colw = [5] + [max(10 if args.dates == "iso" else 6, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        dates = [eng.to_gregorian(amlich.LunarDate(Y, 1, 1)) for _, eng in engines]
        for d, w in zip(dates, colw[1:]):
            row.append(fmt(d).ljust(w))
        if len(set(dates)) > 1:
            row.append("*")
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
