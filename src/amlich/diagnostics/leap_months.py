#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import amlich


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "amlich[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "amlich[diagnostics]"') from e


def leap_table(engine: str, start_year: int, end_year: int) -> List[Tuple[int, int]]:
    """(lunar_year, leap_month) for every leap year in the range."""
    out = []
    for Y in range(start_year, end_year + 1):
        m = amlich.leap_month(Y, engine=engine)
        if m is not None:
            out.append((Y, m))
    return out


def plot_barcode(rows: List[Tuple[int, int]], start_year: int, end_year: int, *, out: str, title: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    fig, ax = plt.subplots(figsize=(16, 3.6))

    # square cell grid only
    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)
    ax.pcolormesh(
        x_edges, y_edges, Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors="0.88",
        linewidth=0.6,
        zorder=0,
    )

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_yticks([1, 3, 6, 9, 12])
    ax.set_xlabel("Lunar year")
    ax.set_ylabel("Leap month")

    x = np.array([y for y, _ in rows], dtype=int)
    m = np.array([mo for _, mo in rows], dtype=int)
    ax.scatter(x, m, s=22, marker="o", c="0.15", linewidths=0.0, zorder=5)

    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(out, dpi=250)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="List leap months per lunar year; optionally plot a barcode diagram.")
    p.add_argument("--engine", default="vietnamese")
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--plot", action="store_true", help="Also save a barcode plot (needs matplotlib).")
    p.add_argument("--out", default="leapmonth_barcode.png")
    p.add_argument("--title", default="Leap month pattern")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    rows = leap_table(args.engine, args.start_year, args.end_year)
    print("Year   Leap month")
    print("-" * 17)
    for Y, M in rows:
        print(f"{Y:<6} {M:>2}")
    print(f"\n{len(rows)} leap years in {args.start_year}..{args.end_year}")

    if args.plot:
        plot_barcode(rows, args.start_year, args.end_year, out=args.out, title=args.title)
        print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
