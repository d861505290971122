"""Wall profiles for bowl previews and the lathe that revolves them."""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple

import numpy as np

from .calculator import BowlDimensions

DEPTH_FACTOR = 0.75


class Profile(Enum):
    HEMISPHERE = "hemisphere"
    PARABOLIC = "parabolic"

    @classmethod
    def parse(cls, value: "Profile | str") -> "Profile":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown profile '{value}'; expected one of: {valid}") from None


class BowlProfile(ABC):
    """Half cross-section of a bowl wall, from the bottom centre to the rim."""

    @abstractmethod
    def point_at(self, t: float, radius: float, depth: float) -> np.ndarray:
        """Return (r, y) at parameter ``t`` in [0, 1]; y is 0 at the rim."""
        ...

    def sample(self, radius: float, depth: float, steps: int = 50) -> np.ndarray:
        if steps < 1:
            raise ValueError("steps must be at least 1")
        ts = np.linspace(0.0, 1.0, int(steps) + 1)
        pts = np.array([self.point_at(float(t), radius, depth) for t in ts], dtype=float)
        pts[:, 0] = np.abs(pts[:, 0])
        return pts


class HemisphereProfile(BowlProfile):
    def point_at(self, t: float, radius: float, depth: float) -> np.ndarray:
        angle = t * math.pi / 2.0
        return np.array([math.sin(angle) * radius, -math.cos(angle) * depth], dtype=float)


class ParabolicProfile(BowlProfile):
    def point_at(self, t: float, radius: float, depth: float) -> np.ndarray:
        # y = depth * ((r / radius)^2 - 1) with r = radius * sqrt(t)
        return np.array([radius * math.sqrt(t), -depth * (1.0 - t)], dtype=float)


_PROFILES = {
    Profile.HEMISPHERE: HemisphereProfile(),
    Profile.PARABOLIC: ParabolicProfile(),
}


def resolve_profile(value: Profile | str | BowlProfile) -> BowlProfile:
    if isinstance(value, BowlProfile):
        return value
    return _PROFILES[Profile.parse(value)]


def wall_profiles(
    dimensions: BowlDimensions,
    profile: Profile | str | BowlProfile = Profile.HEMISPHERE,
    *,
    steps: int = 50,
) -> Tuple[np.ndarray, np.ndarray]:
    """Inner and outer wall curves in meters; depth follows each wall's radius."""
    curve = resolve_profile(profile)
    inner_radius = dimensions.inner_diameter / 2.0
    outer_radius = dimensions.outer_diameter / 2.0
    inner = curve.sample(inner_radius, inner_radius * DEPTH_FACTOR, steps)
    outer = curve.sample(outer_radius, outer_radius * DEPTH_FACTOR, steps)
    return inner, outer


def lathe(points: np.ndarray, segments: int = 64) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Revolve (r, y) points about the vertical axis.

    Returns X, Y, Z grids of shape (segments + 1, N) with Z vertical, ready for
    ``plot_surface``.
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("points must be an (N, 2) array of (r, y) pairs")
    if segments < 3:
        raise ValueError("segments must be at least 3")
    phi = np.linspace(0.0, 2.0 * np.pi, int(segments) + 1)
    r = pts[:, 0]
    y = pts[:, 1]
    X = np.outer(np.cos(phi), r)
    Y = np.outer(np.sin(phi), r)
    Z = np.tile(y, (phi.size, 1))
    return X, Y, Z


def bowl_depth(dimensions: BowlDimensions) -> float:
    """Depth of the inner wall below the rim plane."""
    return dimensions.inner_diameter / 2.0 * DEPTH_FACTOR


__all__ = [
    "DEPTH_FACTOR",
    "BowlProfile",
    "HemisphereProfile",
    "ParabolicProfile",
    "Profile",
    "bowl_depth",
    "lathe",
    "resolve_profile",
    "wall_profiles",
]
