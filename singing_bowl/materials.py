"""Metal catalog used by the singing bowl calculator."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class CrystalStructure(Enum):
    BCC = "BCC"
    FCC = "FCC"
    HCP = "HCP"


@dataclass(frozen=True)
class Material:
    """Atomic constants for a bowl metal (lengths in meters, speed in m/s)."""

    name: str
    atomic_radius: float
    interatomic_spacing: float
    sound_speed: float
    crystal_structure: CrystalStructure

    @property
    def averaged_radius(self) -> float:
        """Mean of the atomic radius and half the interatomic spacing."""
        return (self.atomic_radius + self.interatomic_spacing / 2.0) / 2.0


class Metal(Enum):
    IRON = Material("Iron", 140e-12, 286.65e-12, 5120.0, CrystalStructure.BCC)
    COPPER = Material("Copper", 128e-12, 361.49e-12, 3810.0, CrystalStructure.FCC)
    TITANIUM = Material("Titanium", 147e-12, 295.08e-12, 4140.0, CrystalStructure.HCP)
    BRASS = Material("Brass", 135e-12, 330e-12, 3475.0, CrystalStructure.FCC)

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def material(self) -> Material:
        return self.value


METALS: Mapping[str, Material] = MappingProxyType({metal.key: metal.material for metal in Metal})


def resolve_metal(value: Metal | Material | str) -> Material:
    """Return the catalog record for a metal member, key or record."""
    if isinstance(value, Metal):
        return value.material
    if isinstance(value, Material):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        try:
            return METALS[key]
        except KeyError:
            valid = ", ".join(METALS)
            raise ValueError(f"Unknown metal '{value}'; expected one of: {valid}") from None
    raise TypeError(f"Cannot resolve a metal from {type(value).__name__}")


def metal_key(material: Material) -> str:
    for key, candidate in METALS.items():
        if candidate == material:
            return key
    return material.name.lower()


__all__ = [
    "CrystalStructure",
    "Material",
    "Metal",
    "METALS",
    "metal_key",
    "resolve_metal",
]
