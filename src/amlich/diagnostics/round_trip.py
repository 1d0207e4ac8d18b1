from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import amlich


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_time_zones(s: str) -> List[int]:
    # "7,8" -> [7, 8]
    return [int(x.strip()) for x in s.split(",") if x.strip()]


def roundtrip_test(
    time_zone: int,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0
    eng = amlich.get_calendar("vietnamese", time_zone=time_zone)

    for _ in range(N):
        d0 = random_date(start, end)

        lunar = amlich.convert_solar_to_lunar(d0.day, d0.month, d0.year, time_zone)
        back = amlich.convert_lunar_to_solar(*lunar, time_zone)
        label = eng.day_info(d0).lunar.as_tuple()
        if back != [d0.day, d0.month, d0.year] or label != tuple(lunar) or not 1 <= lunar[0] <= 30:
            failures += 1
            print("\nFAIL")
            print("time_zone:", time_zone)
            print("d0:", d0)
            print("lunar [d, m, y, leap]:", lunar)
            print("engine label (d, m, y, leap):", label)
            print("back [d, m, y]:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> lunar -> gregorian.")
    p.add_argument("--time-zones", type=str, default="7", help="Comma-separated UTC offsets (hours).")
    p.add_argument("--N", type=int, default=2000, help="Trials per time zone.")
    p.add_argument("--start", type=str, default="1800-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2199-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per time zone.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for tz in parse_time_zones(args.time_zones):
        print(f"Testing UTC+{tz} ...")
        total_fail += roundtrip_test(tz, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
