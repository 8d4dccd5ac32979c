"""Tests for the propellant, material and component catalogs."""

import dataclasses

import numpy as np
import pytest

from rocket_workshop.core.components import (
    COMPONENT_DEFINITIONS,
    ChamberSettings,
    ComponentConfig,
    ComponentType,
    NozzleSettings,
    PropertyRange,
    SizeClass,
    TankSettings,
    TurbopumpSettings,
    get_definition,
    required_types,
)
from rocket_workshop.core.materials import (
    MaterialType,
    cost_factor,
    density_factor,
    get_material,
    list_materials,
)
from rocket_workshop.core.propellants import get_propellant, list_propellants


class TestPropellants:
    def test_list_propellants(self):
        assert list_propellants() == ["RP1-LOX", "CH4-LOX"]

    def test_rp1_lox(self):
        prop = get_propellant("RP1-LOX")
        assert prop.optimal_mixture_ratio == pytest.approx(2.34)
        assert prop.characteristic_velocity == pytest.approx(1800)
        assert prop.specific_impulse_sea_level == pytest.approx(282)
        assert prop.specific_impulse_vacuum > prop.specific_impulse_sea_level

    def test_case_insensitive(self):
        assert get_propellant("ch4-lox").name == "Methane/LOX"

    def test_missing_propellant(self):
        with pytest.raises(KeyError, match="Available"):
            get_propellant("N2O-ethanol")

    def test_immutable(self):
        prop = get_propellant("RP1-LOX")
        with pytest.raises(dataclasses.FrozenInstanceError):
            prop.optimal_mixture_ratio = 3.0


class TestMaterials:
    def test_list_materials(self):
        assert set(list_materials()) == {"steel", "aluminum", "inconel"}

    def test_get_material(self):
        mat = get_material("Inconel")
        assert isinstance(mat, MaterialType)
        assert mat.density == pytest.approx(8190)

    def test_missing_material(self):
        with pytest.raises(KeyError):
            get_material("unobtanium")

    def test_reference_factors(self):
        assert density_factor("steel") == pytest.approx(1.0)
        assert cost_factor("steel") == pytest.approx(1.0)
        assert density_factor("aluminum") == pytest.approx(2840 / 8000)
        assert cost_factor("inconel") == pytest.approx(45 / 4)

    def test_aluminum_stronger_per_weight(self):
        assert get_material("aluminum").specific_strength > get_material("steel").specific_strength


class TestComponentDefinitions:
    def test_six_required_types(self):
        assert len(required_types()) == 6
        assert required_types()[0] is ComponentType.COMBUSTION_CHAMBER

    def test_labels(self):
        assert ComponentType.FUEL_INJECTOR.label == "fuel injector"
        assert ComponentType.OXIDIZER_TANK.label == "oxidizer tank"

    def test_defaults_within_ranges(self):
        for definition in COMPONENT_DEFINITIONS.values():
            assert set(definition.default_properties) == set(definition.property_ranges)
            for key, value in definition.default_properties.items():
                assert definition.property_ranges[key].contains(value), key

    def test_get_definition_rejects_strings(self):
        with pytest.raises(TypeError):
            get_definition("nozzle")

    def test_turbopump_definition(self):
        definition = get_definition(ComponentType.TURBOPUMP)
        assert definition.base_cost == pytest.approx(25000)
        assert definition.base_mass == pytest.approx(65)
        assert definition.required


class TestPropertyRange:
    def test_normalize(self):
        rng = PropertyRange(3.0, 15.0, 0.5, "MPa")
        assert rng.normalize(3.0) == pytest.approx(0.0)
        assert rng.normalize(15.0) == pytest.approx(1.0)
        assert rng.normalize(9.0) == pytest.approx(0.5)

    def test_normalize_not_clamped(self):
        rng = PropertyRange(0.0, 10.0, 1.0)
        assert rng.normalize(20.0) == pytest.approx(2.0)

    def test_grid_matches_slider_positions(self):
        rng = get_definition(ComponentType.NOZZLE).property_ranges["throat_diameter"]
        grid = rng.grid()
        assert len(grid) == 23
        assert grid[0] == pytest.approx(0.08)
        assert grid[-1] == pytest.approx(0.30)
        np.testing.assert_allclose(np.diff(grid), 0.01)


class TestComponentConfig:
    def test_create_copies_defaults(self):
        comp = ComponentConfig.create("comp_1", ComponentType.NOZZLE)
        comp.properties["throat_diameter"] = 0.2
        assert get_definition(ComponentType.NOZZLE).default_properties["throat_diameter"] == 0.15

    def test_default_size(self):
        comp = ComponentConfig.create("comp_1", ComponentType.TURBOPUMP)
        assert comp.size is SizeClass.MEDIUM
        assert comp.material == "steel"

    def test_typed_settings(self):
        chamber = ComponentConfig.create("c", ComponentType.COMBUSTION_CHAMBER)
        nozzle = ComponentConfig.create("n", ComponentType.NOZZLE)
        pump = ComponentConfig.create("p", ComponentType.TURBOPUMP)
        tank = ComponentConfig.create("t", ComponentType.OXIDIZER_TANK)
        assert chamber.settings() == ChamberSettings(chamber_pressure=7.0)
        assert nozzle.settings() == NozzleSettings(throat_diameter=0.15, expansion_ratio=16.0)
        assert pump.settings() == TurbopumpSettings(discharge_pressure=10.0, pump_efficiency=0.70)
        assert tank.settings() == TankSettings(propellant_mass=1000.0)

    def test_settings_fall_back_to_defaults(self):
        nozzle = ComponentConfig("n", ComponentType.NOZZLE, properties={"expansion_ratio": 20.0})
        settings = nozzle.settings()
        assert settings.expansion_ratio == pytest.approx(20.0)
        assert settings.throat_diameter == pytest.approx(0.15)

    def test_copy_is_independent(self):
        comp = ComponentConfig.create("c", ComponentType.FUEL_TANK)
        clone = comp.copy()
        clone.properties["propellant_mass"] = 900.0
        assert comp.properties["propellant_mass"] == pytest.approx(400.0)
