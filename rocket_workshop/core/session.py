"""Design session: the mutable engine design being assembled.

A ``DesignSession`` owns the installed components, the propellant choice
and the budget. Every mutating call recalculates performance and notifies
subscribers synchronously before it returns, so observers never see a
stale ``EnginePerformance``.

Sessions are plain objects; create one per design. The performance
calculator they call is a pure function and may be shared freely.

Usage::

    session = DesignSession(SessionConfig(total_budget=120_000))
    unsubscribe = session.subscribe(lambda perf: print(perf.thrust))
    chamber = session.add_component(ComponentType.COMBUSTION_CHAMBER)
    session.set_property(chamber.id, "chamber_pressure", 9.0)
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Callable

from rocket_workshop.core.components import (
    ComponentConfig,
    ComponentType,
    SizeClass,
    get_definition,
    required_types,
)
from rocket_workshop.core.materials import get_material
from rocket_workshop.core.objectives import Objective, ObjectiveStatus
from rocket_workshop.core.performance import EnginePerformance, calculate_performance
from rocket_workshop.core.propellants import DEFAULT_PROPELLANT, PropellantType, get_propellant

logger = logging.getLogger(__name__)

PerformanceListener = Callable[[EnginePerformance], None]


@dataclass
class SessionConfig:
    """Starting conditions for a design session."""

    total_budget: float = 150_000.0  # $
    propellant: str = DEFAULT_PROPELLANT
    default_material: str = "steel"
    objectives: list[Objective] = field(default_factory=list)


class DesignSession:
    """Holds one engine design and keeps its performance up to date.

    Args:
        config: Budget, propellant and objectives. Defaults to ``SessionConfig()``.

    Raises:
        KeyError: If the configured propellant or default material is unknown.
    """

    def __init__(self, config: SessionConfig | None = None) -> None:
        self.config = config or SessionConfig()
        get_material(self.config.default_material)
        self.propellant: PropellantType = get_propellant(self.config.propellant)
        self.total_budget: float = self.config.total_budget
        self.spent_budget: float = 0.0
        self.components: list[ComponentConfig] = []
        self._listeners: list[PerformanceListener] = []
        self._ids = itertools.count(1)
        self.performance: EnginePerformance = self.recalculate()

    # --- Observers ---

    def subscribe(self, listener: PerformanceListener) -> Callable[[], None]:
        """Register *listener*, called with the new performance after every change.

        Subscribing the same listener again has no effect.

        Returns:
            A callable that removes the listener. Calling it twice is harmless.
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        performance = self.recalculate()
        for listener in list(self._listeners):
            listener(performance)

    # --- Mutations ---

    def add_component(
        self, component_type: ComponentType, material: str | None = None
    ) -> ComponentConfig:
        """Install a new component with its type's default properties.

        Raises:
            TypeError: If component_type is not a ``ComponentType``.
            KeyError: If material is unknown.
        """
        get_definition(component_type)
        material = material or self.config.default_material
        get_material(material)

        component = ComponentConfig.create(f"comp_{next(self._ids)}", component_type, material)
        self.components.append(component)
        logger.info("Added %s %s (%s)", component.id, component_type.label, material)
        self._notify()
        return component

    def add_required_components(self, material: str | None = None) -> list[ComponentConfig]:
        """Install one default component for each missing required type."""
        return [
            self.add_component(ctype, material)
            for ctype in required_types()
            if not self.has_component(ctype)
        ]

    def remove_component(self, component_id: str) -> None:
        """Remove a component. Unknown ids are ignored."""
        component = self.get_component(component_id)
        if component is None:
            logger.debug("remove_component: no component %s", component_id)
            return
        self.components.remove(component)
        logger.info("Removed %s %s", component.id, component.type.label)
        self._notify()

    def update_component(
        self,
        component_id: str,
        *,
        material: str | None = None,
        size: SizeClass | str | None = None,
        properties: Mapping[str, float] | None = None,
    ) -> ComponentConfig | None:
        """Merge changes into a component. Unknown ids are ignored.

        Args:
            component_id: Component to update.
            material: New material key.
            size: New size class.
            properties: Property values to merge into the existing ones.

        Returns:
            The updated component, or None if no component has that id.

        Raises:
            KeyError: If material or a property key is unknown for the component.
            ValueError: If size is not a valid size class.
        """
        component = self.get_component(component_id)
        if component is None:
            logger.debug("update_component: no component %s", component_id)
            return None

        if material is not None:
            get_material(material)
        if size is not None:
            size = SizeClass(size)
        if properties:
            ranges = component.definition.property_ranges
            unknown = [key for key in properties if key not in ranges]
            if unknown:
                raise KeyError(
                    f"Unknown properties {unknown} for {component.type.label}. "
                    f"Available: {list(ranges)}"
                )

        if material is not None:
            component.material = material
        if size is not None:
            component.size = size
        if properties:
            component.properties.update({k: float(v) for k, v in properties.items()})
        self._notify()
        return component

    def set_property(self, component_id: str, key: str, value: float) -> ComponentConfig | None:
        """Set a single property, as a slider edit would."""
        return self.update_component(component_id, properties={key: value})

    def set_propellant(self, key: str) -> None:
        """Switch propellant combination.

        Raises:
            KeyError: If key is not in the propellant catalog.
        """
        self.propellant = get_propellant(key)
        logger.info("Propellant set to %s", self.propellant.name)
        self._notify()

    def reset(self) -> None:
        """Remove all components and restart id numbering."""
        self.components = []
        self._ids = itertools.count(1)
        self._notify()

    # --- Queries ---

    def recalculate(self) -> EnginePerformance:
        """Recompute performance from the current components and propellant."""
        self.performance = calculate_performance(self.components, self.propellant)
        self.spent_budget = self.performance.total_cost
        logger.debug(
            "Recalculated %d components: valid=%s thrust=%.1f kN cost=%.0f",
            len(self.components),
            self.performance.is_valid,
            self.performance.thrust,
            self.spent_budget,
        )
        return self.performance

    def get_component(self, component_id: str) -> ComponentConfig | None:
        for component in self.components:
            if component.id == component_id:
                return component
        return None

    def has_component(self, component_type: ComponentType) -> bool:
        return any(c.type == component_type for c in self.components)

    @property
    def remaining_budget(self) -> float:
        return self.total_budget - self.spent_budget

    def is_ready_for_test(self) -> bool:
        """True when the design is valid and affordable."""
        return self.performance.is_valid and self.spent_budget <= self.total_budget

    def check_objectives(
        self, objectives: Iterable[Objective] | None = None
    ) -> list[ObjectiveStatus]:
        """Evaluate objectives against the current performance.

        Args:
            objectives: Objectives to check. Defaults to the configured ones.
        """
        if objectives is None:
            objectives = self.config.objectives
        return [
            ObjectiveStatus(objective, bool(objective.check(self.performance, self)))
            for objective in objectives
        ]
