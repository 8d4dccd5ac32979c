"""Engine performance calculator.

Maps a set of installed components and a propellant combination to an
``EnginePerformance`` record using closed-form propulsion relations:

    ṁ   = Pc · At / c*              choked flow at the throat
    Isp = Isp_SL · η_c · η_mix · η_nozzle · √η_pump
    F   = ṁ · Isp · g0

Design problems (missing parts, an undersized turbopump, a bad mixture
ratio) are not exceptions: they produce an invalid record whose numeric
fields are all zero and whose ``validation_errors`` explain why. Only
contract violations by the caller raise.

References:
    Sutton & Biblarz, "Rocket Propulsion Elements", 9th ed., ch. 3.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import asdict, dataclass, fields
from typing import Any

from rocket_workshop.core.components import (
    ChamberSettings,
    ComponentConfig,
    ComponentType,
    InjectorSettings,
    NozzleSettings,
    TankSettings,
    TurbopumpSettings,
    get_definition,
    required_types,
)
from rocket_workshop.core.materials import cost_factor, density_factor
from rocket_workshop.core.propellants import PropellantType
from rocket_workshop.utils.constants import (
    CHAMBER_PRESSURE_EXPONENT,
    CHAMBER_REFERENCE_PRESSURE,
    G_0,
    MARGINAL_THRUST_TO_WEIGHT,
    MIN_BURN_TIME,
    MIN_THRUST_TO_WEIGHT,
    MIXTURE_ERROR_DEVIATION,
    MIXTURE_PENALTY_SLOPE,
    MIXTURE_WARNING_DEVIATION,
    MPA_TO_PA,
    N_TO_KN,
    NOZZLE_EXPANSION_EXPONENT,
    NOZZLE_OPTIMAL_EXPANSION,
    NOZZLE_OVEREXPANSION_PENALTY,
    NOZZLE_PEAK_EFFICIENCY,
    NOZZLE_REFERENCE_THROAT,
    NOZZLE_UNDEREXPANSION_PENALTY,
    PI,
    PROPERTY_COST_SLOPE,
    PUMP_PRESSURE_EXPONENT,
    PUMP_PRESSURE_MARGIN,
    PUMP_REFERENCE_PRESSURE,
    TANK_MASS_RATIO_ALUMINUM,
    TANK_MASS_RATIO_DEFAULT,
)
from rocket_workshop.utils.validation import (
    ValidationResult,
    validate_at_least,
    validate_non_negative,
    validate_positive,
)


@dataclass(frozen=True)
class EnginePerformance:
    """Result of a performance calculation. Never mutated.

    When ``is_valid`` is False every numeric field is zero and
    ``validation_errors`` is non-empty.
    """

    # Primary metrics
    thrust: float = 0.0  # kN
    specific_impulse: float = 0.0  # s
    thrust_to_weight: float = 0.0

    # Derived
    mass_flow_rate: float = 0.0  # kg/s
    exit_velocity: float = 0.0  # m/s
    chamber_pressure: float = 0.0  # MPa

    # Mass breakdown
    dry_mass: float = 0.0  # kg
    propellant_mass: float = 0.0  # kg
    total_mass: float = 0.0  # kg, wet mass

    burn_time: float = 0.0  # s
    total_cost: float = 0.0  # $
    mixture_ratio: float = 0.0  # actual O/F

    # Efficiency breakdown
    mixture_efficiency: float = 0.0
    nozzle_efficiency: float = 0.0
    overall_efficiency: float = 0.0

    # Validation
    is_valid: bool = False
    validation_errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @classmethod
    def invalid(cls, errors: Sequence[str]) -> EnginePerformance:
        """Zero record for a design that failed validation."""
        if not errors:
            raise ValueError("An invalid performance record needs at least one error")
        return cls(is_valid=False, validation_errors=tuple(errors))

    @classmethod
    def numeric_fields(cls) -> list[str]:
        return [f.name for f in fields(cls) if f.type == "float"]

    def as_dict(self) -> dict[str, Any]:
        """Plain dictionary of all fields (tuples become lists)."""
        data = asdict(self)
        data["validation_errors"] = list(self.validation_errors)
        data["warnings"] = list(self.warnings)
        return data


# --- Efficiency models ---


def nozzle_efficiency(expansion_ratio: float) -> float:
    """Sea-level nozzle efficiency as a function of expansion ratio.

    Peaks at the sea-level optimum (16). Over-expansion is penalised more
    steeply than under-expansion because of flow separation.
    """
    optimum = NOZZLE_OPTIMAL_EXPANSION
    if expansion_ratio < optimum:
        deviation = (optimum - expansion_ratio) / optimum
        return NOZZLE_PEAK_EFFICIENCY - deviation * NOZZLE_UNDEREXPANSION_PENALTY
    deviation = (expansion_ratio - optimum) / optimum
    return NOZZLE_PEAK_EFFICIENCY - deviation * NOZZLE_OVEREXPANSION_PENALTY


def mixture_deviation(mixture_ratio: float, optimal_ratio: float) -> float:
    """Relative deviation of an O/F ratio from the optimum."""
    return abs(mixture_ratio - optimal_ratio) / optimal_ratio


def mixture_efficiency(deviation: float) -> float:
    """Performance factor for running off the optimal mixture ratio."""
    return 1.0 - deviation * MIXTURE_PENALTY_SLOPE


# --- Mass and cost ---


def component_dry_mass(component: ComponentConfig) -> float:
    """Dry mass [kg] of a single component from its scaling law."""
    definition = get_definition(component.type)
    base = definition.base_mass
    settings = component.settings()

    if isinstance(settings, ChamberSettings):
        # Hoop stress: wall thickness grows with pressure
        pressure_factor = (settings.chamber_pressure / CHAMBER_REFERENCE_PRESSURE) ** CHAMBER_PRESSURE_EXPONENT
        return base * pressure_factor * density_factor(component.material)
    if isinstance(settings, NozzleSettings):
        throat_factor = (settings.throat_diameter / NOZZLE_REFERENCE_THROAT) ** 2
        expansion_factor = (settings.expansion_ratio / NOZZLE_OPTIMAL_EXPANSION) ** NOZZLE_EXPANSION_EXPONENT
        return base * throat_factor * expansion_factor * density_factor(component.material)
    if isinstance(settings, TurbopumpSettings):
        return base * (settings.discharge_pressure / PUMP_REFERENCE_PRESSURE) ** PUMP_PRESSURE_EXPONENT
    if isinstance(settings, TankSettings):
        if component.material.lower() == "aluminum":
            ratio = TANK_MASS_RATIO_ALUMINUM
        else:
            ratio = TANK_MASS_RATIO_DEFAULT
        return base + settings.propellant_mass * ratio
    return base * density_factor(component.material)


def calculate_dry_mass(components: Sequence[ComponentConfig]) -> float:
    """Total engine dry mass [kg], rounded to whole kilograms."""
    return float(round(sum(component_dry_mass(c) for c in components)))


def component_cost(component: ComponentConfig) -> float:
    """Cost [$] of a single component.

    Each tunable property raises the cost by up to 50 % as it moves from
    the bottom to the top of its range. Settings far below the range
    cannot drive the factor under zero.
    """
    definition = get_definition(component.type)
    cost = definition.base_cost * cost_factor(component.material)
    for key, value in component.properties.items():
        prop_range = definition.property_ranges.get(key)
        if prop_range is not None:
            cost *= max(0.0, 1.0 + PROPERTY_COST_SLOPE * prop_range.normalize(value))
    return cost


def calculate_total_cost(components: Sequence[ComponentConfig]) -> float:
    """Total engine cost [$], rounded to whole dollars."""
    return float(round(sum(component_cost(c) for c in components)))


# --- Main entry point ---


def _group_by_type(
    components: Sequence[ComponentConfig],
) -> dict[ComponentType, list[ComponentConfig]]:
    grouped: dict[ComponentType, list[ComponentConfig]] = {}
    for comp in components:
        get_definition(comp.type)  # raises TypeError on a foreign type
        grouped.setdefault(comp.type, []).append(comp)
    return grouped


def _check_installed(grouped: dict[ComponentType, list[ComponentConfig]]) -> ValidationResult:
    result = ValidationResult()
    for ctype in required_types():
        if not grouped.get(ctype):
            result.error(ctype.value, f"Missing {ctype.label}")
    if not result.is_valid:
        return result
    for ctype in required_types():
        count = len(grouped[ctype])
        if count > 1:
            result.error(ctype.value, f"Duplicate {ctype.label}: {count} installed, expected 1")
    return result


def calculate_performance(
    components: Sequence[ComponentConfig], propellant: PropellantType
) -> EnginePerformance:
    """Compute engine performance for a set of installed components.

    Args:
        components: Installed components, exactly one per required type.
        propellant: Propellant combination the engine burns.

    Returns:
        A fresh ``EnginePerformance``. Invalid designs yield a zero record
        with ``validation_errors`` populated.

    Raises:
        TypeError: If a component's type is not a ``ComponentType``.
        KeyError: If a component references an unknown material.
    """
    grouped = _group_by_type(components)

    check = _check_installed(grouped)
    if not check.is_valid:
        return EnginePerformance.invalid(check.error_texts())

    chamber: ChamberSettings = grouped[ComponentType.COMBUSTION_CHAMBER][0].settings()
    nozzle: NozzleSettings = grouped[ComponentType.NOZZLE][0].settings()
    injector: InjectorSettings = grouped[ComponentType.FUEL_INJECTOR][0].settings()
    pump: TurbopumpSettings = grouped[ComponentType.TURBOPUMP][0].settings()
    fuel_mass = grouped[ComponentType.FUEL_TANK][0].settings().propellant_mass
    oxidizer_mass = grouped[ComponentType.OXIDIZER_TANK][0].settings().propellant_mass

    # --- Tunable settings must be real, non-negative numbers ---
    for comp in components:
        for key, prop_range in comp.definition.property_ranges.items():
            validate_non_negative(f"{comp.id}.{key}", comp.get(key), check, prop_range.label)
    if not check.is_valid:
        return EnginePerformance.invalid(check.error_texts())

    # --- Degenerate inputs (would otherwise divide by zero) ---
    validate_positive("chamber_pressure", chamber.chamber_pressure, check, "Chamber pressure")
    validate_positive("throat_diameter", nozzle.throat_diameter, check, "Throat diameter")
    validate_positive("expansion_ratio", nozzle.expansion_ratio, check, "Expansion ratio")
    validate_positive(
        "combustion_efficiency", injector.combustion_efficiency, check, "Combustion efficiency"
    )
    validate_positive("pump_efficiency", pump.pump_efficiency, check, "Pump efficiency")
    validate_positive("fuel_mass", fuel_mass, check, "Fuel tank propellant mass")
    validate_positive("oxidizer_mass", oxidizer_mass, check, "Oxidizer tank propellant mass")
    if not check.is_valid:
        return EnginePerformance.invalid(check.error_texts())

    # --- Structural limits ---
    required_pump_pressure = chamber.chamber_pressure * PUMP_PRESSURE_MARGIN
    validate_at_least(
        "discharge_pressure",
        pump.discharge_pressure,
        required_pump_pressure,
        check,
        f"Insufficient turbopump pressure: {pump.discharge_pressure:g} MPa discharge, "
        f"need >= {required_pump_pressure:.2f} MPa for a {chamber.chamber_pressure:g} MPa chamber",
    )

    mixture_ratio = oxidizer_mass / fuel_mass
    optimal_ratio = propellant.optimal_mixture_ratio
    deviation = mixture_deviation(mixture_ratio, optimal_ratio)
    if deviation > MIXTURE_ERROR_DEVIATION:
        check.error(
            "mixture_ratio",
            f"Mixture ratio {mixture_ratio:.2f} is too far from optimal {optimal_ratio:.2f} "
            f"({deviation:.0%} deviation)",
            value=mixture_ratio,
            limit=optimal_ratio,
        )
    elif deviation > MIXTURE_WARNING_DEVIATION:
        check.warning(
            "mixture_ratio",
            f"Mixture ratio {mixture_ratio:.2f} differs from optimal {optimal_ratio:.2f}, "
            "reduced efficiency",
            value=mixture_ratio,
            limit=optimal_ratio,
        )

    eta_nozzle = nozzle_efficiency(nozzle.expansion_ratio)
    if eta_nozzle <= 0.0:
        check.error(
            "expansion_ratio",
            f"Expansion ratio {nozzle.expansion_ratio:g} is far outside the usable range",
        )

    if not check.is_valid:
        return EnginePerformance.invalid(check.error_texts())

    # --- Flow ---
    throat_area = PI * (nozzle.throat_diameter / 2.0) ** 2
    c_star = propellant.characteristic_velocity * injector.combustion_efficiency
    mass_flow_rate = chamber.chamber_pressure * MPA_TO_PA * throat_area / c_star

    # --- Efficiency ---
    eta_mixture = mixture_efficiency(deviation)
    eta_overall = injector.combustion_efficiency * eta_mixture * eta_nozzle

    # Turbine drive flow is bled from the propellant supply
    specific_impulse = (
        propellant.specific_impulse_sea_level * eta_overall * math.sqrt(pump.pump_efficiency)
    )
    exit_velocity = specific_impulse * G_0
    thrust_n = mass_flow_rate * exit_velocity

    # --- Mass budget ---
    dry_mass = calculate_dry_mass(components)
    propellant_mass = fuel_mass + oxidizer_mass
    total_mass = dry_mass + propellant_mass
    thrust_to_weight = thrust_n / (total_mass * G_0)
    burn_time = propellant_mass / mass_flow_rate

    total_cost = calculate_total_cost(components)

    # --- Advisories ---
    if thrust_to_weight < MIN_THRUST_TO_WEIGHT:
        check.warning(
            "thrust_to_weight",
            f"T/W ratio {thrust_to_weight:.2f} < {MIN_THRUST_TO_WEIGHT:.1f}: "
            "engine cannot lift itself",
        )
    elif thrust_to_weight < MARGINAL_THRUST_TO_WEIGHT:
        check.warning(
            "thrust_to_weight",
            f"T/W ratio {thrust_to_weight:.2f} is marginal, aim for > {MARGINAL_THRUST_TO_WEIGHT}",
        )
    if burn_time < MIN_BURN_TIME:
        check.warning(
            "burn_time",
            f"Short burn: only {burn_time:.1f} s, consider more propellant",
        )

    return EnginePerformance(
        thrust=thrust_n * N_TO_KN,
        specific_impulse=specific_impulse,
        thrust_to_weight=thrust_to_weight,
        mass_flow_rate=mass_flow_rate,
        exit_velocity=exit_velocity,
        chamber_pressure=chamber.chamber_pressure,
        dry_mass=dry_mass,
        propellant_mass=propellant_mass,
        total_mass=total_mass,
        burn_time=burn_time,
        total_cost=total_cost,
        mixture_ratio=mixture_ratio,
        mixture_efficiency=eta_mixture,
        nozzle_efficiency=eta_nozzle,
        overall_efficiency=eta_overall,
        is_valid=True,
        validation_errors=(),
        warnings=check.warning_texts(),
    )
