"""SVG cross-section drawings of bowl walls."""
from __future__ import annotations

import os.path

import numpy as np
import svgwrite

from singing_bowl.calculator import BowlDimensions
from singing_bowl.profiles import Profile, wall_profiles


class BowlSectionSvg:
    """Render the inner and outer wall profiles of a bowl to SVG."""

    def __init__(
        self,
        filename: str = "bowl_section.svg",
        size: tuple[int, int] = (900, 700),
        margin: int = 40,
        output_dir: str = "output_svg",
    ) -> None:
        self.filename = filename
        self.size = size
        self.margin = margin
        self.output_dir = output_dir
        if not os.path.exists(self.output_dir):
            os.makedirs(self.output_dir)

    @property
    def path(self) -> str:
        return os.path.join(self.output_dir, self.filename)

    def _scale(self, dimensions: BowlDimensions) -> float:
        width, height = self.size
        span_x = max(dimensions.outer_diameter, 1e-12)
        span_y = max(dimensions.outer_diameter / 2.0, 1e-12)
        return min((width - 2 * self.margin) / span_x, (height - 2 * self.margin) / span_y)

    def _to_pixels(self, pts: np.ndarray, scale: float) -> list[tuple[float, float]]:
        width, _ = self.size
        cx = width / 2.0
        return [(cx + float(r) * scale, self.margin - float(y) * scale) for r, y in pts]

    def draw(
        self,
        dimensions: BowlDimensions,
        profile: Profile | str = Profile.HEMISPHERE,
        *,
        steps: int = 50,
        label: str | None = None,
    ) -> str:
        inner, outer = wall_profiles(dimensions, profile, steps=steps)
        scale = self._scale(dimensions)

        dwg = svgwrite.Drawing(self.path, profile="full", size=self.size)
        for pts, stroke in ((outer, "gray"), (inner, "black")):
            mirrored = np.column_stack([-pts[::-1, 0], pts[::-1, 1]])
            outline = np.vstack([mirrored, pts[1:]])
            dwg.add(dwg.polyline(self._to_pixels(outline, scale), fill="none", stroke=stroke, stroke_width=1.5))

        width, _ = self.size
        dwg.add(
            dwg.line(
                start=(width / 2.0, self.margin / 2.0),
                end=(width / 2.0, self.size[1] - self.margin / 2.0),
                stroke="blue",
                stroke_width=0.5,
                stroke_dasharray="5,3",
            )
        )
        if label:
            dwg.add(dwg.text(label, insert=(self.margin, self.size[1] - self.margin / 2.0), font_size=14))

        dwg.save()
        return self.path


__all__ = ["BowlSectionSvg"]
