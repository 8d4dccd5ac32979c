"""Structural material catalog for Rocket Workshop.

Provides density, service temperature, strength and cost for the materials
a component can be built from. Stainless steel is the reference material:
mass and cost scaling factors are expressed relative to it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MaterialType:
    """Room-temperature structural material properties."""

    name: str
    density: float  # kg/m³
    max_temperature: float  # K, service temperature limit
    yield_strength: float  # MPa
    cost_per_kg: float  # $

    @property
    def specific_strength(self) -> float:
        """Yield strength per unit density [kN·m/kg]."""
        return self.yield_strength * 1e3 / self.density


MATERIALS: dict[str, MaterialType] = {
    "steel": MaterialType(
        name="Stainless Steel 304L",
        density=8000.0,
        max_temperature=1089.0,  # ~816°C
        yield_strength=170.0,
        cost_per_kg=4.0,
    ),
    "aluminum": MaterialType(
        name="Aluminum 2219-T87",
        density=2840.0,
        max_temperature=422.0,  # loses strength above ~149°C
        yield_strength=393.0,
        cost_per_kg=12.0,
    ),
    "inconel": MaterialType(
        name="Inconel 718",
        density=8190.0,
        max_temperature=1255.0,  # superalloy for hot sections
        yield_strength=1034.0,
        cost_per_kg=45.0,
    ),
}

REFERENCE_MATERIAL = "steel"


def list_materials() -> list[str]:
    """Return all material identifiers in the catalog."""
    return list(MATERIALS.keys())


def get_material(material_id: str) -> MaterialType:
    """Return the material record.

    Raises:
        KeyError: If material_id is not in the catalog.
    """
    for key, val in MATERIALS.items():
        if key.lower() == material_id.lower():
            return val
    raise KeyError(f"Material '{material_id}' not found. Available: {list(MATERIALS.keys())}")


def density_factor(material_id: str) -> float:
    """Material density relative to the reference steel."""
    return get_material(material_id).density / MATERIALS[REFERENCE_MATERIAL].density


def cost_factor(material_id: str) -> float:
    """Material cost per kg relative to the reference steel."""
    return get_material(material_id).cost_per_kg / MATERIALS[REFERENCE_MATERIAL].cost_per_kg
