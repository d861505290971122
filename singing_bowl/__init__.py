"""Singing bowl acoustic geometry."""

from .calculator import (
    AIR_SOUND_SPEED,
    MAX_AUDIBLE_FREQ,
    MIN_AUDIBLE_FREQ,
    PYTHAGOREAN_COMMA,
    BowlDimensions,
    BowlParameters,
    SingingBowlCalculator,
    enumerate_octaves,
    normalize_to_audible,
)
from .design import BowlDesign
from .formatting import format_frequency, format_length, format_parameters
from .materials import METALS, CrystalStructure, Material, Metal, resolve_metal
from .profiles import Profile, lathe, wall_profiles
from .ratio import parse_ratio_text, parse_thickness_ratio, validate_thickness_ratio

__all__ = [
    "AIR_SOUND_SPEED",
    "MAX_AUDIBLE_FREQ",
    "MIN_AUDIBLE_FREQ",
    "PYTHAGOREAN_COMMA",
    "BowlDimensions",
    "BowlParameters",
    "SingingBowlCalculator",
    "enumerate_octaves",
    "normalize_to_audible",
    "BowlDesign",
    "format_frequency",
    "format_length",
    "format_parameters",
    "METALS",
    "CrystalStructure",
    "Material",
    "Metal",
    "resolve_metal",
    "Profile",
    "lathe",
    "wall_profiles",
    "parse_ratio_text",
    "parse_thickness_ratio",
    "validate_thickness_ratio",
]
