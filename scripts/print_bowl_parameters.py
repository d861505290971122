#!/usr/bin/env python3
"""Print bowl parameter tables for every catalog metal."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from singing_bowl import METALS, SingingBowlCalculator, parse_ratio_text
from singing_bowl.formatting import format_frequency, format_parameters


def iter_metals(names=None):
    for key in METALS:
        if names and key not in names:
            continue
        yield key


def format_octaves(octaves) -> str:
    return ", ".join(format_frequency(freq) for freq in octaves)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "name",
        nargs="*",
        help="Optional list of metal keys to print (default: all)",
    )
    parser.add_argument("--ratio", default="531441/524288", help="Thickness ratio as N/D or a decimal.")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    names = [name.lower() for name in args.name]
    entries = list(iter_metals(names))
    if not entries:
        targets = ", ".join(args.name) if args.name else ""
        raise SystemExit(f"No matching metals found: {targets}")

    try:
        ratio = parse_ratio_text(args.ratio)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    for key in entries:
        calc = SingingBowlCalculator(key, ratio)
        params = calc.compute_bowl_parameters()
        print(f"{params.metal}\n{'-' * len(params.metal)}")
        print(f"  Fundamental             {format_frequency(calc.compute_fundamental_frequency())}")
        print(format_parameters(params))
        print(f"  Octaves: {format_octaves(params.available_octaves)}")
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
