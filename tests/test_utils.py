"""Tests for utility modules."""

import pytest

from rocket_workshop.utils.constants import G_0, MPA_TO_PA, PUMP_PRESSURE_MARGIN
from rocket_workshop.utils.units import (
    convert,
    force_from_si,
    mass_from_si,
    pressure_from_si,
    pressure_to_si,
    velocity_from_si,
)
from rocket_workshop.utils.validation import (
    Severity,
    ValidationResult,
    validate_at_least,
    validate_non_negative,
    validate_positive,
)


class TestConstants:
    def test_g0(self):
        assert G_0 == pytest.approx(9.80665)

    def test_mpa(self):
        assert MPA_TO_PA == pytest.approx(1e6)

    def test_pump_margin(self):
        assert PUMP_PRESSURE_MARGIN == pytest.approx(1.25)


class TestUnits:
    def test_pressure_mpa_to_pa(self):
        assert pressure_to_si(7.0, "MPa") == pytest.approx(7e6, rel=1e-9)

    def test_pressure_pa_to_psi(self):
        assert pressure_from_si(101325, "psi") == pytest.approx(14.696, rel=1e-3)

    def test_force_n_to_lbf(self):
        assert force_from_si(4.4482216, "lbf") == pytest.approx(1.0, rel=1e-6)

    def test_mass_kg_to_lb(self):
        assert mass_from_si(1.0, "lb") == pytest.approx(2.20462, rel=1e-5)

    def test_velocity(self):
        assert velocity_from_si(0.3048, "ft/s") == pytest.approx(1.0, rel=1e-9)

    def test_convert_generic(self):
        assert convert(1.0, "km", "m") == pytest.approx(1000.0, rel=1e-6)


class TestValidation:
    def test_empty_is_valid(self):
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings

    def test_error_and_warning_texts_keep_order(self):
        result = ValidationResult()
        result.warning("a", "first warning")
        result.error("b", "first error")
        result.warning("c", "second warning")
        result.error("d", "second error")
        assert not result.is_valid
        assert result.error_texts() == ("first error", "second error")
        assert result.warning_texts() == ("first warning", "second warning")

    def test_info_does_not_invalidate(self):
        result = ValidationResult()
        result.info("x", "note")
        assert result.is_valid
        assert result.messages[0].severity is Severity.INFO

    def test_validate_positive(self):
        result = ValidationResult()
        validate_positive("throat_diameter", 0.0, result, "Throat diameter")
        assert not result.is_valid
        assert result.errors[0].message == "Throat diameter must be positive and finite, got 0"

    def test_validate_positive_rejects_nan(self):
        result = ValidationResult()
        validate_positive("x", float("nan"), result)
        assert not result.is_valid

    def test_validate_positive_rejects_infinity(self):
        result = ValidationResult()
        validate_positive("x", float("inf"), result, "X")
        assert result.error_texts() == ("X must be positive and finite, got inf",)

    @pytest.mark.parametrize("value", [-1.0, float("inf"), float("-inf"), float("nan")])
    def test_validate_non_negative_rejects(self, value):
        result = ValidationResult()
        validate_non_negative("x", value, result)
        assert not result.is_valid

    def test_validate_non_negative_accepts_zero(self):
        result = ValidationResult()
        validate_non_negative("x", 0.0, result)
        assert result.is_valid

    def test_validate_at_least(self):
        result = ValidationResult()
        validate_at_least("p", 5.0, 8.75, result, "too low")
        validate_at_least("q", 9.0, 8.75, result, "fine")
        assert result.error_texts() == ("too low",)
        assert result.errors[0].limit == pytest.approx(8.75)

    def test_validate_at_least_warning(self):
        result = ValidationResult()
        validate_at_least("p", 1.0, 2.0, result, "low", severity=Severity.WARNING)
        assert result.is_valid
        assert result.has_warnings

    def test_merge(self):
        a = ValidationResult()
        b = ValidationResult()
        b.error("x", "bad")
        a.merge(b)
        assert not a.is_valid
