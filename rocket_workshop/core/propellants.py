"""Propellant catalog for Rocket Workshop.

Bipropellant combinations with representative sea-level/vacuum specific
impulse, densities, optimal mixture ratio and characteristic velocity.
Values are taken from flight engines (Merlin 1D for RP-1/LOX, Raptor for
methane/LOX) and are adequate for preliminary performance estimates.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PropellantType:
    """Bipropellant combination properties."""

    name: str
    fuel_name: str
    oxidizer_name: str
    specific_impulse_sea_level: float  # s
    specific_impulse_vacuum: float  # s
    density_fuel: float  # kg/m³
    density_oxidizer: float  # kg/m³
    optimal_mixture_ratio: float  # O/F by mass
    combustion_temperature: float  # K, adiabatic flame temperature
    characteristic_velocity: float  # m/s, c*


PROPELLANTS: dict[str, PropellantType] = {
    "RP1-LOX": PropellantType(
        name="RP-1/LOX",
        fuel_name="RP-1 (Kerosene)",
        oxidizer_name="Liquid Oxygen",
        specific_impulse_sea_level=282.0,
        specific_impulse_vacuum=311.0,
        density_fuel=810.0,  # at 25°C
        density_oxidizer=1141.0,  # at boiling point
        optimal_mixture_ratio=2.34,
        combustion_temperature=3670.0,
        characteristic_velocity=1800.0,
    ),
    "CH4-LOX": PropellantType(
        name="Methane/LOX",
        fuel_name="Liquid Methane",
        oxidizer_name="Liquid Oxygen",
        specific_impulse_sea_level=330.0,
        specific_impulse_vacuum=363.0,
        density_fuel=422.0,
        density_oxidizer=1141.0,
        optimal_mixture_ratio=3.6,
        combustion_temperature=3550.0,
        characteristic_velocity=1850.0,
    ),
}

DEFAULT_PROPELLANT = "RP1-LOX"


def list_propellants() -> list[str]:
    """Return all propellant keys in the catalog."""
    return list(PROPELLANTS.keys())


def get_propellant(key: str) -> PropellantType:
    """Look up a propellant combination by key (case-insensitive).

    Raises:
        KeyError: If key is not in the catalog.
    """
    for name, prop in PROPELLANTS.items():
        if name.lower() == key.lower():
            return prop
    raise KeyError(f"Propellant '{key}' not found. Available: {list(PROPELLANTS.keys())}")
