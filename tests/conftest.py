"""Shared fixtures: a nominal RP-1/LOX engine built from catalog defaults."""

import pytest

from rocket_workshop.core.components import ComponentConfig, ComponentType, required_types
from rocket_workshop.core.propellants import get_propellant


def _nominal_components(material: str = "steel") -> list[ComponentConfig]:
    return [
        ComponentConfig.create(f"comp_{i}", ctype, material)
        for i, ctype in enumerate(required_types(), start=1)
    ]


@pytest.fixture
def rp1_lox():
    return get_propellant("RP1-LOX")


@pytest.fixture
def nominal_components():
    """Scenario A: 7 MPa chamber, 0.15 m throat, ε=16, 400 kg RP-1, 1000 kg LOX."""
    return _nominal_components()


@pytest.fixture
def make_design():
    """Factory: nominal components with per-type property overrides.

    Usage::

        make_design({ComponentType.TURBOPUMP: {"discharge_pressure": 5.0}})
    """

    def _make(overrides=None, material="steel"):
        components = _nominal_components(material)
        for comp in components:
            comp.properties.update((overrides or {}).get(comp.type, {}))
        return components

    return _make


@pytest.fixture
def heavy_design(make_design):
    """Optimal-mixture engine with full tanks and a configurable throat."""

    def _make(throat_diameter):
        return make_design({
            ComponentType.NOZZLE: {"throat_diameter": throat_diameter},
            ComponentType.FUEL_TANK: {"propellant_mass": 1500.0},
            ComponentType.OXIDIZER_TANK: {"propellant_mass": 3510.0},
        })

    return _make
