"""3D preview of a lathed singing bowl."""
from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from singing_bowl.calculator import BowlDimensions
from singing_bowl.profiles import Profile, bowl_depth, lathe, wall_profiles

INNER_COLOR = "#666666"
OUTER_COLOR = "#888888"


def set_axes_equal_3d(ax, xs=None, ys=None, zs=None, use_ortho=False):
    """Force equal data scale on a 3D axes so the rim looks circular."""
    if xs is None or ys is None or zs is None:
        xmin, xmax = ax.get_xlim3d()
        ymin, ymax = ax.get_ylim3d()
        zmin, zmax = ax.get_zlim3d()
    else:
        xmin, xmax = float(np.min(xs)), float(np.max(xs))
        ymin, ymax = float(np.min(ys)), float(np.max(ys))
        zmin, zmax = float(np.min(zs)), float(np.max(zs))
    xmid, ymid, zmid = (xmin + xmax) / 2.0, (ymin + ymax) / 2.0, (zmin + zmax) / 2.0
    r = max(xmax - xmin, ymax - ymin, zmax - zmin, 1e-12) / 2.0
    ax.set_xlim3d([xmid - r, xmid + r])
    ax.set_ylim3d([ymid - r, ymid + r])
    ax.set_zlim3d([zmid - r, zmid + r])
    ax.set_box_aspect((1, 1, 1))
    if use_ortho:
        ax.set_proj_type("ortho")


def _floor_grid(ax, z: float, half_size: float, spacing: float = 1.0) -> None:
    ticks = np.arange(-half_size, half_size + spacing * 0.5, spacing)
    for t in ticks:
        ax.plot([t, t], [-half_size, half_size], [z, z], color="0.8", lw=0.8)
        ax.plot([-half_size, half_size], [t, t], [z, z], color="0.8", lw=0.8)


def plot_bowl_preview(
    dimensions: BowlDimensions,
    profile: Profile | str = Profile.HEMISPHERE,
    *,
    ax=None,
    segments: int = 64,
    steps: int = 50,
    show_grid: bool = True,
    title: str | None = None,
    show: bool = True,
):
    """Render inner and outer bowl walls as lathed surfaces (meters)."""
    if ax is None:
        fig = plt.figure(figsize=(8, 7))
        ax = fig.add_subplot(111, projection="3d")

    inner, outer = wall_profiles(dimensions, profile, steps=steps)
    Xi, Yi, Zi = lathe(inner, segments)
    Xo, Yo, Zo = lathe(outer, segments)

    ax.plot_surface(Xo, Yo, Zo, color=OUTER_COLOR, alpha=0.7, linewidth=0, shade=True)
    ax.plot_surface(Xi, Yi, Zi, color=INNER_COLOR, alpha=0.9, linewidth=0, shade=True)

    xs = [Xi.ravel(), Xo.ravel()]
    ys = [Yi.ravel(), Yo.ravel()]
    if show_grid:
        # decimeter grid for bowls under a meter across
        spacing = 1.0 if dimensions.outer_diameter >= 1.0 else 0.1
        half = spacing * max(1.0, float(np.ceil(dimensions.outer_diameter / 2.0 / spacing)))
        _floor_grid(ax, -bowl_depth(dimensions), half, spacing)
        xs.append(np.array([-half, half]))
        ys.append(np.array([-half, half]))

    ax.set_xlabel("X (m)")
    ax.set_ylabel("Y (m)")
    ax.set_zlabel("Z (m)")
    if title:
        ax.set_title(title)

    set_axes_equal_3d(
        ax,
        xs=np.concatenate(xs),
        ys=np.concatenate(ys),
        zs=np.concatenate([Zi.ravel(), Zo.ravel()]),
    )

    if show:
        plt.tight_layout()
        plt.show()
    return ax


def plot_wall_section(
    dimensions: BowlDimensions,
    profile: Profile | str = Profile.HEMISPHERE,
    *,
    ax=None,
    steps: int = 50,
):
    """2D cross-section of both walls, mirrored about the bowl axis."""
    if ax is None:
        _, ax = plt.subplots()

    inner, outer = wall_profiles(dimensions, profile, steps=steps)
    for pts, color, label in ((inner, INNER_COLOR, "inner"), (outer, OUTER_COLOR, "outer")):
        ax.plot(pts[:, 0], pts[:, 1], color=color, label=label)
        ax.plot(-pts[:, 0], pts[:, 1], color=color)

    ax.set_xlabel("radius (m)")
    ax.set_ylabel("height (m)")
    ax.set_aspect("equal", adjustable="box")
    ax.legend(loc="best", fontsize="small")
    return ax


__all__ = ["set_axes_equal_3d", "plot_bowl_preview", "plot_wall_section"]
