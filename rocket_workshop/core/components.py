"""Engine component catalog and component instances.

Defines the six component types an engine is assembled from, their catalog
definitions (base cost, base mass, default settings and tunable property
ranges), and ``ComponentConfig``, the mutable instance a design session
owns.

Component properties are stored as a flat ``key -> value`` mapping so that
display layers can build one slider per entry in ``property_ranges``.
Calculations read them through the strongly-typed settings variants
(``ChamberSettings``, ``NozzleSettings``, ...) returned by
``ComponentConfig.settings()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Union

import numpy as np


class ComponentType(Enum):
    """Engine component types."""

    COMBUSTION_CHAMBER = "combustion_chamber"
    NOZZLE = "nozzle"
    FUEL_INJECTOR = "fuel_injector"
    TURBOPUMP = "turbopump"
    FUEL_TANK = "fuel_tank"
    OXIDIZER_TANK = "oxidizer_tank"

    @property
    def label(self) -> str:
        """Human-readable lower-case name, e.g. ``"fuel injector"``."""
        return self.value.replace("_", " ")


class SizeClass(Enum):
    """Nominal size class of a component."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class PropertyRange:
    """Allowed range of a tunable component property."""

    minimum: float
    maximum: float
    step: float
    unit: str = ""
    label: str = ""
    description: str = ""

    def normalize(self, value: float) -> float:
        """Position of *value* within the range: 0 at minimum, 1 at maximum.

        Values outside the range are not clamped.
        """
        return (value - self.minimum) / (self.maximum - self.minimum)

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def grid(self) -> np.ndarray:
        """All slider positions from minimum to maximum (inclusive)."""
        n_steps = int(round((self.maximum - self.minimum) / self.step))
        return self.minimum + self.step * np.arange(n_steps + 1)


@dataclass(frozen=True)
class ComponentDefinition:
    """Catalog entry for a component type. Never mutated."""

    type: ComponentType
    name: str
    description: str
    base_cost: float  # $
    base_mass: float  # kg
    required: bool
    default_properties: dict[str, float] = field(default_factory=dict)
    property_ranges: dict[str, PropertyRange] = field(default_factory=dict)


COMPONENT_DEFINITIONS: dict[ComponentType, ComponentDefinition] = {
    ComponentType.COMBUSTION_CHAMBER: ComponentDefinition(
        type=ComponentType.COMBUSTION_CHAMBER,
        name="Combustion Chamber",
        description=(
            "Where propellants mix and burn. Higher pressure gives more thrust "
            "but needs heavier walls."
        ),
        base_cost=15000.0,
        base_mass=45.0,
        required=True,
        default_properties={"chamber_pressure": 7.0},
        property_ranges={
            "chamber_pressure": PropertyRange(
                3.0, 15.0, 0.5, "MPa", "Chamber Pressure",
                "Higher pressure increases thrust but requires stronger (heavier) walls",
            ),
        },
    ),
    ComponentType.NOZZLE: ComponentDefinition(
        type=ComponentType.NOZZLE,
        name="Nozzle (De Laval)",
        description=(
            "Converging-diverging nozzle that accelerates the exhaust. "
            "Throat size sets the mass flow."
        ),
        base_cost=8000.0,
        base_mass=25.0,
        required=True,
        default_properties={"throat_diameter": 0.15, "expansion_ratio": 16.0},
        property_ranges={
            "throat_diameter": PropertyRange(
                0.08, 0.30, 0.01, "m", "Throat Diameter",
                "Larger throat gives more mass flow and thrust but needs a bigger turbopump",
            ),
            "expansion_ratio": PropertyRange(
                8.0, 40.0, 1.0, ":1", "Expansion Ratio",
                "Exit-to-throat area ratio Ae/At, about 16 is optimal at sea level",
            ),
        },
    ),
    ComponentType.FUEL_INJECTOR: ComponentDefinition(
        type=ComponentType.FUEL_INJECTOR,
        name="Injector Plate",
        description=(
            "Atomizes and mixes propellants. More elements give better mixing "
            "and higher combustion efficiency."
        ),
        base_cost=12000.0,
        base_mass=18.0,
        required=True,
        default_properties={"injector_elements": 100.0, "combustion_efficiency": 0.95},
        property_ranges={
            "injector_elements": PropertyRange(
                40.0, 200.0, 10.0, "", "Injector Elements",
                "More elements improve atomization but are more complex and expensive",
            ),
            "combustion_efficiency": PropertyRange(
                0.90, 0.99, 0.01, "", "Combustion Efficiency",
                "Ratio of achieved to theoretical c*",
            ),
        },
    ),
    ComponentType.TURBOPUMP: ComponentDefinition(
        type=ComponentType.TURBOPUMP,
        name="Turbopump Assembly",
        description=(
            "Pressurizes propellants. Discharge pressure must exceed chamber "
            "pressure to keep propellant flowing."
        ),
        base_cost=25000.0,
        base_mass=65.0,
        required=True,
        default_properties={"discharge_pressure": 10.0, "pump_efficiency": 0.70},
        property_ranges={
            "discharge_pressure": PropertyRange(
                5.0, 25.0, 0.5, "MPa", "Discharge Pressure",
                "Must be 20-30% above chamber pressure to cover the injector pressure drop",
            ),
            "pump_efficiency": PropertyRange(
                0.55, 0.80, 0.05, "", "Pump Efficiency",
                "Higher efficiency wastes less propellant driving the turbine",
            ),
        },
    ),
    ComponentType.FUEL_TANK: ComponentDefinition(
        type=ComponentType.FUEL_TANK,
        name="Fuel Tank",
        description="Stores fuel. Tank structure is typically 5-10% of the propellant mass.",
        base_cost=5000.0,
        base_mass=15.0,
        required=True,
        default_properties={"propellant_mass": 400.0},
        property_ranges={
            "propellant_mass": PropertyRange(
                100.0, 1500.0, 50.0, "kg", "Fuel Load",
                "More fuel gives a longer burn but a heavier vehicle",
            ),
        },
    ),
    ComponentType.OXIDIZER_TANK: ComponentDefinition(
        type=ComponentType.OXIDIZER_TANK,
        name="Oxidizer Tank",
        description="Stores cryogenic oxidizer. Slightly heavier than the fuel tank due to insulation.",
        base_cost=6000.0,
        base_mass=20.0,
        required=True,
        default_properties={"propellant_mass": 1000.0},
        property_ranges={
            "propellant_mass": PropertyRange(
                200.0, 4000.0, 100.0, "kg", "Oxidizer Load",
                "Should be about the optimal mixture ratio times the fuel load",
            ),
        },
    ),
}


def get_definition(component_type: ComponentType) -> ComponentDefinition:
    """Return the catalog definition for a component type.

    Raises:
        TypeError: If component_type is not a ``ComponentType``.
    """
    if not isinstance(component_type, ComponentType):
        raise TypeError(f"Expected a ComponentType, got {component_type!r}")
    return COMPONENT_DEFINITIONS[component_type]


def required_types() -> list[ComponentType]:
    """Component types every complete engine needs, in catalog order."""
    return [t for t, d in COMPONENT_DEFINITIONS.items() if d.required]


# --- Typed settings variants ---


@dataclass(frozen=True)
class ChamberSettings:
    chamber_pressure: float  # MPa


@dataclass(frozen=True)
class NozzleSettings:
    throat_diameter: float  # m
    expansion_ratio: float  # Ae/At


@dataclass(frozen=True)
class InjectorSettings:
    injector_elements: float
    combustion_efficiency: float


@dataclass(frozen=True)
class TurbopumpSettings:
    discharge_pressure: float  # MPa
    pump_efficiency: float


@dataclass(frozen=True)
class TankSettings:
    propellant_mass: float  # kg


ComponentSettings = Union[
    ChamberSettings, NozzleSettings, InjectorSettings, TurbopumpSettings, TankSettings
]

_SETTINGS_TYPES: dict[ComponentType, type] = {
    ComponentType.COMBUSTION_CHAMBER: ChamberSettings,
    ComponentType.NOZZLE: NozzleSettings,
    ComponentType.FUEL_INJECTOR: InjectorSettings,
    ComponentType.TURBOPUMP: TurbopumpSettings,
    ComponentType.FUEL_TANK: TankSettings,
    ComponentType.OXIDIZER_TANK: TankSettings,
}


# --- Component instance ---


@dataclass
class ComponentConfig:
    """A component installed in a design.

    Args:
        id: Identifier unique within the owning session.
        type: Component type.
        material: Material key (see ``rocket_workshop.core.materials``).
        size: Nominal size class.
        properties: Tunable property values keyed by property name.
    """

    id: str
    type: ComponentType
    material: str = "steel"
    size: SizeClass = SizeClass.MEDIUM
    properties: dict[str, float] = field(default_factory=dict)

    @classmethod
    def create(
        cls, component_id: str, component_type: ComponentType, material: str = "steel"
    ) -> ComponentConfig:
        """Create a component populated with its type's default properties."""
        definition = get_definition(component_type)
        return cls(
            id=component_id,
            type=component_type,
            material=material,
            properties=dict(definition.default_properties),
        )

    @property
    def definition(self) -> ComponentDefinition:
        return get_definition(self.type)

    def get(self, key: str) -> float:
        """Property value, falling back to the definition default."""
        if key in self.properties:
            return self.properties[key]
        return self.definition.default_properties[key]

    def settings(self) -> ComponentSettings:
        """Strongly-typed view of this component's properties."""
        settings_cls = _SETTINGS_TYPES[get_definition(self.type).type]
        return settings_cls(**{f.name: float(self.get(f.name)) for f in fields(settings_cls)})

    def copy(self) -> ComponentConfig:
        """Independent copy (the property mapping is not shared)."""
        return replace(self, properties=dict(self.properties))
