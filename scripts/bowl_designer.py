#!/usr/bin/env python3
"""Interactive singing bowl designer (matplotlib widgets)."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from singing_bowl import METALS, BowlDesign, Profile

DEFAULT_METAL = "iron"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--metal", default=DEFAULT_METAL, choices=sorted(METALS), help=f"Default: {DEFAULT_METAL}")
    parser.add_argument(
        "--profile",
        default=Profile.HEMISPHERE.value,
        choices=[p.value for p in Profile],
        help="Initial wall profile.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    from plotting.designer import BowlDesigner

    app = BowlDesigner(BowlDesign(metal=args.metal, profile=args.profile))
    app.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
