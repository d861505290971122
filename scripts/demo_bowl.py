#!/usr/bin/env python3
"""Compute singing bowl dimensions and preview the lathed bowl."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from singing_bowl import METALS, BowlDesign, Profile, parse_ratio_text
from singing_bowl.design import DISPLAY_TOLERANCE_HZ
from singing_bowl.formatting import format_frequency, format_parameters

DEFAULT_METAL = "iron"
DEFAULT_RATIO = "531441/524288"
DEFAULT_PROFILE = Profile.HEMISPHERE.value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--metal", default=DEFAULT_METAL, choices=sorted(METALS), help=f"Default: {DEFAULT_METAL}")
    parser.add_argument(
        "--ratio",
        default=DEFAULT_RATIO,
        help=f"Outer/inner diameter ratio as N/D or a decimal (default: {DEFAULT_RATIO}, the Pythagorean comma)",
    )
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--octave",
        type=int,
        default=None,
        help="Index into the available octaves, lowest first; negative indices allowed.",
    )
    selection.add_argument(
        "--frequency",
        type=float,
        default=None,
        help="Frequency in Hz as listed by --list-octaves; matched to the nearest octave within 0.005 Hz.",
    )
    parser.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        choices=[p.value for p in Profile],
        help=f"Wall profile used for the preview (default: {DEFAULT_PROFILE})",
    )
    parser.add_argument("--list-octaves", action="store_true", help="Print the available octaves.")
    parser.add_argument("--svg-out", type=Path, default=None, help="Optional SVG filepath for the wall section.")
    parser.add_argument("--plot2d", action="store_true", help="Plot the wall cross-section instead of the 3D bowl.")
    parser.add_argument("--no-plot", action="store_true", help="Skip the matplotlib preview.")
    return parser.parse_args(list(argv) if argv is not None else None)


def build_design(args: argparse.Namespace) -> BowlDesign:
    design = BowlDesign(metal=args.metal, thickness_ratio=parse_ratio_text(args.ratio), profile=args.profile)
    if args.octave is not None:
        design = design.with_octave_index(args.octave)
    elif args.frequency is not None:
        design = design.with_frequency(args.frequency, abs_tol=DISPLAY_TOLERANCE_HZ)
    return design


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        design = build_design(args)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    params = design.parameters()
    title = f"{params.metal} @ {format_frequency(params.selected_frequency)}"
    print(title)
    print("-" * len(title))
    print(format_parameters(params))

    if args.list_octaves:
        print()
        print("Available octaves:")
        for idx, freq in enumerate(params.available_octaves):
            marker = " *" if freq == params.selected_frequency else ""
            print(f"  [{idx:>2}] {format_frequency(freq):>12}{marker}")

    if args.svg_out is not None:
        from plotting.svg import BowlSectionSvg

        out = args.svg_out
        renderer = BowlSectionSvg(filename=out.name, output_dir=str(out.parent))
        path = renderer.draw(params.dimensions, design.profile, label=title)
        print(f"SVG section written to {path}")

    if args.no_plot:
        return 0

    import matplotlib.pyplot as plt

    if args.plot2d:
        from plotting.bowl import plot_wall_section

        ax = plot_wall_section(params.dimensions, design.profile)
        ax.set_title(title)
    else:
        from plotting.bowl import plot_bowl_preview

        plot_bowl_preview(params.dimensions, design.profile, title=title, show=False)

    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
