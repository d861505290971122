"""Immutable bowl design state.

Every change produces a new :class:`BowlDesign`, and every query builds a fresh
:class:`SingingBowlCalculator`; nothing is updated in place.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import math
from typing import Sequence
import warnings

from .calculator import PYTHAGOREAN_COMMA, BowlParameters, SingingBowlCalculator
from .materials import Material, Metal, resolve_metal
from .profiles import Profile
from .ratio import validate_thickness_ratio

_REL_TOL = 1e-9
# half a unit of the two-decimal frequency display
DISPLAY_TOLERANCE_HZ = 0.005


def find_octave(frequency: float, octaves: Sequence[float], *, abs_tol: float = 0.0) -> float | None:
    """Return the entry of ``octaves`` nearest ``frequency`` within tolerance, or None."""
    best = None
    for candidate in octaves:
        if not math.isclose(candidate, frequency, rel_tol=_REL_TOL, abs_tol=abs_tol):
            continue
        if best is None or abs(candidate - frequency) < abs(best - frequency):
            best = candidate
    return best


@dataclass(frozen=True)
class BowlDesign:
    metal: Material = field(default_factory=lambda: Metal.IRON.material)
    thickness_ratio: float = PYTHAGOREAN_COMMA
    selected_frequency: float | None = None
    profile: Profile = Profile.HEMISPHERE

    def __post_init__(self) -> None:
        object.__setattr__(self, "metal", resolve_metal(self.metal))
        object.__setattr__(self, "thickness_ratio", validate_thickness_ratio(self.thickness_ratio))
        object.__setattr__(self, "profile", Profile.parse(self.profile))

    def calculator(self) -> SingingBowlCalculator:
        return SingingBowlCalculator(self.metal, self.thickness_ratio)

    def parameters(self) -> BowlParameters:
        return self.calculator().compute_bowl_parameters(self.selected_frequency)

    def with_metal(self, metal: Metal | Material | str) -> "BowlDesign":
        """Switch metals, keeping the selected tone only if the new metal offers it."""
        updated = replace(self, metal=resolve_metal(metal))
        if self.selected_frequency is None:
            return updated

        params = updated.calculator().compute_bowl_parameters()
        match = find_octave(self.selected_frequency, params.available_octaves)
        if match is None:
            warnings.warn(
                f"{self.selected_frequency:.2f} Hz is not available for {updated.metal.name}; "
                f"using {params.normalized_frequency:.2f} Hz instead",
                UserWarning,
                stacklevel=2,
            )
            return replace(updated, selected_frequency=params.normalized_frequency)
        return replace(updated, selected_frequency=match)

    def with_thickness_ratio(self, ratio: float) -> "BowlDesign":
        return replace(self, thickness_ratio=ratio)

    def with_frequency(self, frequency: float | None, *, abs_tol: float = 0.0) -> "BowlDesign":
        """Select one of the available octaves; None restores the default tone.

        ``abs_tol`` (Hz) accepts rounded input such as ``DISPLAY_TOLERANCE_HZ``.
        """
        if frequency is None:
            return replace(self, selected_frequency=None)
        octaves = self.calculator().compute_bowl_parameters().available_octaves
        match = find_octave(float(frequency), octaves, abs_tol=abs_tol)
        if match is None:
            raise ValueError(f"{float(frequency):.2f} Hz is not an available octave for {self.metal.name}")
        return replace(self, selected_frequency=match)

    def with_octave_index(self, index: int) -> "BowlDesign":
        octaves = self.calculator().compute_bowl_parameters().available_octaves
        try:
            return replace(self, selected_frequency=octaves[index])
        except IndexError:
            raise ValueError(
                f"Octave index {index} out of range; {self.metal.name} has {len(octaves)} octaves"
            ) from None

    def with_profile(self, profile: Profile | str) -> "BowlDesign":
        return replace(self, profile=Profile.parse(profile))


__all__ = ["DISPLAY_TOLERANCE_HZ", "BowlDesign", "find_octave"]
