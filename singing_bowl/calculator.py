# calculator.py
# Acoustic geometry for singing bowls: fold a metal's theoretical fundamental
# into the audible band and size the bowl so its inner diameter spans one
# wavelength of that tone in air.
#
# Usage:
#   calc = SingingBowlCalculator(Metal.COPPER)
#   params = calc.compute_bowl_parameters()
#   params.dimensions.inner_diameter

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import List, Mapping

from .materials import METALS, Material, Metal, resolve_metal

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

AIR_SOUND_SPEED = 343.0  # m/s
MIN_AUDIBLE_FREQ = 20.0  # Hz
MAX_AUDIBLE_FREQ = 20000.0  # Hz
EXTRA_OCTAVES_DOWN = 4
PYTHAGOREAN_COMMA = 531441 / 524288


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BowlDimensions:
    """Bowl wall geometry in meters."""

    inner_diameter: float
    outer_diameter: float
    thickness: float


@dataclass(frozen=True)
class BowlParameters:
    """Calculator output; frequencies in Hz, lengths in meters."""

    metal: str
    averaged_radius: float
    fundamental_wavelength: float
    normalized_frequency: float
    available_octaves: tuple[float, ...]
    selected_frequency: float
    dimensions: BowlDimensions
    wavelength_in_metal: float
    wavelength_in_air: float


# ---------------------------------------------------------------------------
# Octave folding
# ---------------------------------------------------------------------------


def normalize_to_audible(frequency: float, *, extra_octaves_down: int = EXTRA_OCTAVES_DOWN) -> float:
    """Fold a positive frequency into the audible band, then drop a few octaves.

    The descent stops at the first halving that would fall below the audible
    floor, so the result always stays within [MIN_AUDIBLE_FREQ, MAX_AUDIBLE_FREQ].
    """
    freq = float(frequency)
    if not math.isfinite(freq) or freq <= 0.0:
        raise ValueError(f"frequency must be positive and finite, got {frequency!r}")

    while freq > MAX_AUDIBLE_FREQ:
        freq /= 2.0

    while freq < MIN_AUDIBLE_FREQ:
        freq *= 2.0

    for _ in range(extra_octaves_down):
        next_freq = freq / 2.0
        if next_freq < MIN_AUDIBLE_FREQ:
            break
        freq = next_freq

    return freq


def enumerate_octaves(base: float) -> List[float]:
    """Return every octave of ``base`` inside the audible band, ascending."""
    base = float(base)
    if not math.isfinite(base) or base <= 0.0:
        raise ValueError(f"base frequency must be positive and finite, got {base!r}")
    octaves = [base]

    freq = base / 2.0
    while freq >= MIN_AUDIBLE_FREQ:
        octaves.append(freq)
        freq /= 2.0

    freq = base * 2.0
    while freq <= MAX_AUDIBLE_FREQ:
        octaves.append(freq)
        freq *= 2.0

    return sorted(octaves)


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------


class SingingBowlCalculator:
    """Derive bowl frequencies and dimensions for one metal and wall ratio.

    Instances are immutable; build a new calculator when the metal or the
    thickness ratio changes. The ratio is not validated here, see
    ``singing_bowl.ratio`` for the caller-side checks.
    """

    def __init__(
        self,
        metal: Metal | Material | str = Metal.IRON,
        thickness_ratio: float = PYTHAGOREAN_COMMA,
    ) -> None:
        self._metal = resolve_metal(metal)
        self._thickness_ratio = float(thickness_ratio)
        self._averaged_radius = self._metal.averaged_radius

    @property
    def metal(self) -> Material:
        return self._metal

    @property
    def thickness_ratio(self) -> float:
        return self._thickness_ratio

    @property
    def averaged_radius(self) -> float:
        return self._averaged_radius

    @staticmethod
    def materials() -> Mapping[str, Material]:
        """Read-only view of the metal catalog keyed by lowercase name."""
        return METALS

    # --- frequencies ---------------------------------------------------------

    def compute_fundamental_frequency(self) -> float:
        """Half-wavelength resonance across the averaged atomic radius."""
        return self._metal.sound_speed / (2.0 * self._averaged_radius)

    def normalize_to_audible_frequency(self) -> float:
        return normalize_to_audible(self.compute_fundamental_frequency())

    def enumerate_octaves(self, base: float) -> List[float]:
        return enumerate_octaves(base)

    # --- geometry ------------------------------------------------------------

    def wavelength_in_metal(self, frequency: float) -> float:
        return self._metal.sound_speed / frequency

    @staticmethod
    def wavelength_in_air(frequency: float) -> float:
        return AIR_SOUND_SPEED / frequency

    def compute_dimensions(self, frequency: float) -> BowlDimensions:
        """Inner diameter spans one wavelength in air; outer scales by the ratio."""
        inner = self.wavelength_in_air(frequency)
        outer = inner * self._thickness_ratio
        return BowlDimensions(
            inner_diameter=inner,
            outer_diameter=outer,
            thickness=(outer - inner) / 2.0,
        )

    def compute_bowl_parameters(self, selected_frequency: float | None = None) -> BowlParameters:
        """Compute the full parameter set for ``selected_frequency``.

        ``None``, 0 or NaN (never a playable tone) selects the normalized
        frequency. Any other value is used as given, without validation.
        """
        normalized = self.normalize_to_audible_frequency()
        octaves = self.enumerate_octaves(normalized)

        if selected_frequency is None or selected_frequency == 0 or math.isnan(selected_frequency):
            frequency = normalized
        else:
            frequency = float(selected_frequency)

        return BowlParameters(
            metal=self._metal.name,
            averaged_radius=self._averaged_radius,
            fundamental_wavelength=2.0 * self._averaged_radius,
            normalized_frequency=normalized,
            available_octaves=tuple(octaves),
            selected_frequency=frequency,
            dimensions=self.compute_dimensions(frequency),
            wavelength_in_metal=self.wavelength_in_metal(frequency),
            wavelength_in_air=self.wavelength_in_air(frequency),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(metal={self._metal.name!r}, thickness_ratio={self._thickness_ratio!r})"


__all__ = [
    "AIR_SOUND_SPEED",
    "MIN_AUDIBLE_FREQ",
    "MAX_AUDIBLE_FREQ",
    "EXTRA_OCTAVES_DOWN",
    "PYTHAGOREAN_COMMA",
    "BowlDimensions",
    "BowlParameters",
    "SingingBowlCalculator",
    "enumerate_octaves",
    "normalize_to_audible",
]
