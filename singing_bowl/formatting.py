"""Human-readable formatting of bowl parameters."""
from __future__ import annotations

from typing import List, Tuple

from .calculator import BowlParameters


def format_length(meters: float) -> str:
    """Pick picometers, nanometers, millimeters or meters by magnitude."""
    value = float(meters)
    if value < 1e-6:
        return f"{value * 1e12:.2f} picometers"
    if value < 1e-3:
        return f"{value * 1e9:.2f} nanometers"
    if value < 1.0:
        return f"{value * 1e3:.2f} millimeters"
    return f"{value:.2f} meters"


def format_frequency(hz: float) -> str:
    return f"{float(hz):.2f} Hz"


def parameter_rows(params: BowlParameters) -> List[Tuple[str, str]]:
    dims = params.dimensions
    return [
        ("Metal", params.metal),
        ("Averaged Atomic Radius", format_length(params.averaged_radius)),
        ("Fundamental Wavelength", format_length(params.fundamental_wavelength)),
        ("Normalized Frequency", format_frequency(params.normalized_frequency)),
        ("Selected Frequency", format_frequency(params.selected_frequency)),
        ("Wavelength in Metal", format_length(params.wavelength_in_metal)),
        ("Wavelength in Air", format_length(params.wavelength_in_air)),
        ("Inner Diameter", format_length(dims.inner_diameter)),
        ("Outer Diameter", format_length(dims.outer_diameter)),
        ("Thickness", format_length(dims.thickness)),
    ]


def format_parameters(params: BowlParameters) -> str:
    rows = parameter_rows(params)
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"  {label:<{width}}  {text}" for label, text in rows)


__all__ = ["format_frequency", "format_length", "format_parameters", "parameter_rows"]
