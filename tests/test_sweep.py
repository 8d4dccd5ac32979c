"""Tests for single-property trade studies."""

import numpy as np
import pytest

from rocket_workshop.core.components import ComponentType
from rocket_workshop.core.sweep import sweep_property


class TestSweepProperty:
    def test_default_grid(self, nominal_components, rp1_lox):
        result = sweep_property(
            nominal_components, rp1_lox, ComponentType.NOZZLE, "expansion_ratio"
        )
        assert len(result.values) == 33
        assert result.values[0] == pytest.approx(8.0)
        assert result.values[-1] == pytest.approx(40.0)
        assert len(result.thrust) == len(result.values)
        assert np.all(result.valid)

    def test_nozzle_optimum(self, nominal_components, rp1_lox):
        result = sweep_property(
            nominal_components, rp1_lox, ComponentType.NOZZLE, "expansion_ratio"
        )
        assert result.best("thrust") == pytest.approx(16.0)

    def test_explicit_values(self, nominal_components, rp1_lox):
        result = sweep_property(
            nominal_components,
            rp1_lox,
            ComponentType.COMBUSTION_CHAMBER,
            "chamber_pressure",
            values=[5.0, 7.0, 9.0],
        )
        np.testing.assert_allclose(result.values, [5.0, 7.0, 9.0])
        # 9 MPa needs 11.25 MPa from a 10 MPa pump
        np.testing.assert_array_equal(result.valid, [True, True, False])
        assert result.thrust[2] == 0.0
        assert result.thrust[1] > result.thrust[0]

    def test_best_ignores_invalid(self, nominal_components, rp1_lox):
        result = sweep_property(
            nominal_components, rp1_lox, ComponentType.COMBUSTION_CHAMBER, "chamber_pressure"
        )
        # Pump at 10 MPa supports chambers up to 8 MPa
        assert result.best("thrust") == pytest.approx(8.0)

    def test_no_valid_points(self, nominal_components, rp1_lox):
        result = sweep_property(
            nominal_components,
            rp1_lox,
            ComponentType.TURBOPUMP,
            "discharge_pressure",
            values=[5.0, 6.0],
        )
        assert result.best("thrust") is None

    def test_unknown_metric(self, nominal_components, rp1_lox):
        result = sweep_property(
            nominal_components, rp1_lox, ComponentType.NOZZLE, "expansion_ratio", [16.0]
        )
        with pytest.raises(ValueError):
            result.best("colour")

    def test_baseline_untouched(self, nominal_components, rp1_lox):
        before = [c.copy() for c in nominal_components]
        sweep_property(nominal_components, rp1_lox, ComponentType.NOZZLE, "throat_diameter")
        assert nominal_components == before

    def test_unknown_property(self, nominal_components, rp1_lox):
        with pytest.raises(KeyError):
            sweep_property(nominal_components, rp1_lox, ComponentType.NOZZLE, "chamber_pressure")

    def test_component_not_installed(self, nominal_components, rp1_lox):
        without_nozzle = [c for c in nominal_components if c.type != ComponentType.NOZZLE]
        with pytest.raises(KeyError):
            sweep_property(without_nozzle, rp1_lox, ComponentType.NOZZLE, "expansion_ratio")

    def test_cost_rises_with_setting(self, nominal_components, rp1_lox):
        result = sweep_property(
            nominal_components, rp1_lox, ComponentType.FUEL_INJECTOR, "injector_elements"
        )
        assert np.all(np.diff(result.total_cost) >= 0)
        assert result.total_cost[-1] > result.total_cost[0]
