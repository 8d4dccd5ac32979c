"""Single-parameter trade studies.

Evaluates the performance calculator across a range of values of one
component property, holding everything else fixed. By default the range
is the property's slider grid from the component catalog.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from rocket_workshop.core.components import ComponentConfig, ComponentType, get_definition
from rocket_workshop.core.performance import EnginePerformance, calculate_performance
from rocket_workshop.core.propellants import PropellantType

SWEEP_METRICS = ("thrust", "specific_impulse", "thrust_to_weight", "burn_time", "total_cost")


@dataclass
class SweepResult:
    """Performance at each sweep point.

    Invalid points carry zeros in every metric array and False in ``valid``.
    """

    component_type: ComponentType
    key: str
    values: np.ndarray = field(default_factory=lambda: np.array([]))
    thrust: np.ndarray = field(default_factory=lambda: np.array([]))  # kN
    specific_impulse: np.ndarray = field(default_factory=lambda: np.array([]))  # s
    thrust_to_weight: np.ndarray = field(default_factory=lambda: np.array([]))
    burn_time: np.ndarray = field(default_factory=lambda: np.array([]))  # s
    total_cost: np.ndarray = field(default_factory=lambda: np.array([]))  # $
    valid: np.ndarray = field(default_factory=lambda: np.array([], dtype=bool))
    performances: list[EnginePerformance] = field(default_factory=list, repr=False)

    def best(self, metric: str = "thrust") -> float | None:
        """Swept value that maximises *metric* among valid points.

        Returns:
            The value, or None if no point is valid.

        Raises:
            ValueError: If metric is not a sweep metric.
        """
        if metric not in SWEEP_METRICS:
            raise ValueError(f"Unknown metric '{metric}'. Available: {list(SWEEP_METRICS)}")
        if not np.any(self.valid):
            return None
        data = np.where(self.valid, getattr(self, metric), -np.inf)
        return float(self.values[int(np.argmax(data))])


def sweep_property(
    components: Sequence[ComponentConfig],
    propellant: PropellantType,
    component_type: ComponentType,
    key: str,
    values: Sequence[float] | np.ndarray | None = None,
) -> SweepResult:
    """Evaluate performance while varying one property of one component.

    The input components are not modified.

    Args:
        components: Baseline design.
        propellant: Propellant combination.
        component_type: Type of the component whose property is varied.
        key: Property name.
        values: Values to evaluate. Defaults to the property's slider grid.

    Raises:
        KeyError: If the property is not tunable on that component type,
            or no component of that type is installed.
    """
    definition = get_definition(component_type)
    if key not in definition.property_ranges:
        raise KeyError(
            f"'{key}' is not a property of {component_type.label}. "
            f"Available: {list(definition.property_ranges)}"
        )
    if not any(c.type == component_type for c in components):
        raise KeyError(f"No {component_type.label} installed")

    if values is None:
        grid = definition.property_ranges[key].grid()
    else:
        grid = np.asarray(values, dtype=float)

    performances: list[EnginePerformance] = []
    for value in grid:
        trial = [c.copy() for c in components]
        for comp in trial:
            if comp.type == component_type:
                comp.properties[key] = float(value)
        performances.append(calculate_performance(trial, propellant))

    result = SweepResult(
        component_type=component_type,
        key=key,
        values=grid,
        valid=np.array([p.is_valid for p in performances], dtype=bool),
        performances=performances,
    )
    for metric in SWEEP_METRICS:
        setattr(result, metric, np.array([getattr(p, metric) for p in performances], dtype=float))
    return result
