"""Unit conversion utilities for Rocket Workshop.

Provides a lightweight unit conversion layer built on top of pint, used by
display code that reports engine performance in non-SI units.
"""

from __future__ import annotations

from functools import lru_cache

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
_ureg.formatter.default_format = "~P"  # short pretty format


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


Q_ = _ureg.Quantity


# --- Convenience conversion functions ---


def pressure_to_si(value: float, unit: str) -> float:
    """Convert pressure value to Pascals.

    Args:
        value: Numeric pressure value.
        unit: Source unit string (e.g. "bar", "psi", "MPa", "atm").

    Returns:
        Pressure in Pa.
    """
    return Q_(value, unit).to("Pa").magnitude


def pressure_from_si(value_pa: float, unit: str) -> float:
    """Convert pressure from Pascals to target unit."""
    return Q_(value_pa, "Pa").to(unit).magnitude


def force_from_si(value_n: float, unit: str) -> float:
    """Convert force from Newtons to target unit."""
    return Q_(value_n, "N").to(unit).magnitude


def mass_from_si(value_kg: float, unit: str) -> float:
    """Convert mass from kilograms to target unit."""
    return Q_(value_kg, "kg").to(unit).magnitude


def velocity_from_si(value_ms: float, unit: str) -> float:
    """Convert velocity from m/s to target unit."""
    return Q_(value_ms, "m/s").to(unit).magnitude


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source unit string.
        to_unit: Target unit string.

    Returns:
        Converted numeric value.
    """
    return Q_(value, from_unit).to(to_unit).magnitude
