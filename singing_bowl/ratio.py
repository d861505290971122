"""Caller-side parsing and validation of bowl thickness ratios."""
from __future__ import annotations

import math


def _to_float(value, label: str) -> float:
    if isinstance(value, str):
        value = value.strip()
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be numeric, got {value!r}") from None


def validate_thickness_ratio(ratio: float) -> float:
    """Return ``ratio`` as a float, rejecting zero, negative or non-finite values."""
    value = _to_float(ratio, "Thickness ratio")
    if not math.isfinite(value):
        raise ValueError(f"Thickness ratio must be finite, got {value!r}")
    if value <= 0.0:
        raise ValueError(f"Thickness ratio must be positive, got {value!r}")
    return value


def parse_thickness_ratio(numerator, denominator) -> float:
    """Build a thickness ratio from a numerator/denominator pair."""
    num = _to_float(numerator, "Numerator")
    den = _to_float(denominator, "Denominator")
    if math.isnan(num) or math.isnan(den):
        raise ValueError("Numerator and denominator must be numbers")
    if den == 0.0:
        raise ValueError("Denominator must be non-zero")
    return validate_thickness_ratio(num / den)


def parse_ratio_text(text: str) -> float:
    """Parse ``"531441/524288"`` or a plain decimal such as ``"1.0136"``."""
    numerator, sep, denominator = str(text).partition("/")
    if sep:
        return parse_thickness_ratio(numerator, denominator)
    return validate_thickness_ratio(numerator)


__all__ = ["parse_ratio_text", "parse_thickness_ratio", "validate_thickness_ratio"]
