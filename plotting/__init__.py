"""Plotting utilities, lazily importing heavy matplotlib dependencies."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "plot_bowl_preview",
    "plot_wall_section",
    "set_axes_equal_3d",
    "BowlSectionSvg",
    "BowlDesigner",
]


def __getattr__(name: str) -> Any:
    if name == "BowlSectionSvg":
        return import_module("plotting.svg").BowlSectionSvg
    if name == "BowlDesigner":
        return import_module("plotting.designer").BowlDesigner
    if name in {"plot_bowl_preview", "plot_wall_section", "set_axes_equal_3d"}:
        module = import_module("plotting.bowl")
        return getattr(module, name)
    raise AttributeError(f"module 'plotting' has no attribute '{name}'")
