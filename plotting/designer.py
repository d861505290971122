"""Interactive matplotlib front end for the bowl calculator."""
from __future__ import annotations

from dataclasses import dataclass
import warnings

import matplotlib.pyplot as plt
from matplotlib.widgets import Button, RadioButtons, TextBox

from singing_bowl.design import BowlDesign
from singing_bowl.formatting import format_frequency, parameter_rows
from singing_bowl.materials import METALS, metal_key
from singing_bowl.profiles import Profile
from singing_bowl.ratio import parse_thickness_ratio

from .bowl import plot_bowl_preview

Rect = tuple[float, float, float, float]


@dataclass
class Column:
    """Stack rects top to bottom inside a figure-fraction column."""

    x: float
    top: float
    w: float
    gap: float = 0.015

    def next(self, height: float) -> Rect:
        y = self.top - height
        self.top = y - self.gap
        return (self.x, y, self.w, height)


class BowlDesigner:
    """Metal, profile, thickness ratio and octave controls beside a 3D preview.

    Every control event replaces ``self.design`` and redraws from scratch.
    """

    def __init__(self, design: BowlDesign | None = None, *, fig=None) -> None:
        self.design = design if design is not None else BowlDesign()
        self.fig = fig if fig is not None else plt.figure(figsize=(13, 8))
        self.preview_ax = self.fig.add_axes((0.02, 0.05, 0.6, 0.9), projection="3d")

        col = Column(x=0.66, top=0.95, w=0.31)
        self.metal_ax = self.fig.add_axes(col.next(0.16))
        self.profile_ax = self.fig.add_axes(col.next(0.08))
        ratio_rect = col.next(0.05)
        self.octave_ax = self.fig.add_axes(col.next(0.26))
        self.info_ax = self.fig.add_axes(col.next(0.3))

        x, y, w, h = ratio_rect
        self.num_box = TextBox(self.fig.add_axes((x, y, w * 0.36, h)), "", initial="531441")
        self.den_box = TextBox(self.fig.add_axes((x + w * 0.42, y, w * 0.36, h)), "/", initial="524288")
        self.update_button = Button(self.fig.add_axes((x + w * 0.82, y, w * 0.18, h)), "Update")

        keys = list(METALS)
        self.metal_radio = RadioButtons(
            self.metal_ax,
            [key.capitalize() for key in keys],
            active=keys.index(metal_key(self.design.metal)),
        )
        self.metal_ax.set_title("Metal", fontsize=10, loc="left")
        self.metal_radio.on_clicked(self.on_metal)

        profiles = [p.value for p in Profile]
        self.profile_radio = RadioButtons(
            self.profile_ax,
            [name.capitalize() for name in profiles],
            active=profiles.index(self.design.profile.value),
        )
        self.profile_ax.set_title("Bowl Shape", fontsize=10, loc="left")
        self.profile_radio.on_clicked(self.on_profile)

        self.update_button.on_clicked(self.on_ratio)
        self.octave_radio: RadioButtons | None = None
        self._octaves: tuple[float, ...] = ()
        self.status = ""

        self.refresh()

    # --- event handlers ------------------------------------------------------

    def on_metal(self, label: str) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            self.design = self.design.with_metal(label)
        self.status = str(caught[-1].message) if caught else ""
        self.refresh()

    def on_profile(self, label: str) -> None:
        self.design = self.design.with_profile(label)
        self.status = ""
        self.refresh()

    def on_ratio(self, _event=None) -> None:
        try:
            ratio = parse_thickness_ratio(self.num_box.text, self.den_box.text)
        except ValueError as exc:
            self.status = str(exc)
            self.refresh(rebuild_octaves=False, redraw_preview=False)
            return
        self.design = self.design.with_thickness_ratio(ratio)
        self.status = ""
        self.refresh()

    def on_octave(self, label: str) -> None:
        index = self._octave_labels().index(label)
        self.design = self.design.with_frequency(self._octaves[index])
        self.status = ""
        self.refresh(rebuild_octaves=False)

    # --- drawing -------------------------------------------------------------

    def _octave_labels(self) -> list[str]:
        return [format_frequency(freq) for freq in self._octaves]

    def _build_octaves(self, selected: float) -> None:
        if self.octave_radio is not None:
            self.octave_radio.disconnect_events()
        self.octave_ax.clear()
        labels = self._octave_labels()
        active = self._octaves.index(selected) if selected in self._octaves else 0
        self.octave_radio = RadioButtons(self.octave_ax, labels, active=active)
        self.octave_ax.set_title("Frequency Selection", fontsize=10, loc="left")
        self.octave_radio.on_clicked(self.on_octave)

    def _draw_info(self, params) -> None:
        ax = self.info_ax
        ax.clear()
        ax.set_axis_off()
        ax.set_facecolor("0.96")
        lines = [f"{label}: {text}" for label, text in parameter_rows(params)]
        lines.append(f"Thickness Ratio: {self.design.thickness_ratio:.6f}")
        if self.status:
            lines.append("")
            lines.append(self.status)
        ax.text(0.0, 1.0, "\n".join(lines), transform=ax.transAxes, va="top", ha="left", fontsize=9)

    def refresh(self, *, rebuild_octaves: bool = True, redraw_preview: bool = True) -> None:
        params = self.design.parameters()
        if rebuild_octaves or params.available_octaves != self._octaves:
            self._octaves = params.available_octaves
            self._build_octaves(params.selected_frequency)

        if redraw_preview:
            self.preview_ax.clear()
            plot_bowl_preview(
                params.dimensions,
                self.design.profile,
                ax=self.preview_ax,
                title=f"{params.metal} @ {format_frequency(params.selected_frequency)}",
                show=False,
            )
        self._draw_info(params)
        self.fig.canvas.draw_idle()

    def show(self) -> None:
        plt.show()


__all__ = ["BowlDesigner", "Column"]
