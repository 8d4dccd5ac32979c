"""Core modules for Rocket Workshop.

This package contains the engine design model:
- propellants: Propellant combination catalog
- materials: Structural material catalog
- components: Component definitions and instances
- performance: Engine performance calculator
- objectives: Design objective predicates
- session: Design session with change notification
- sweep: Single-parameter trade studies
"""

from rocket_workshop.core.components import ComponentConfig, ComponentType, SizeClass
from rocket_workshop.core.performance import EnginePerformance, calculate_performance
from rocket_workshop.core.session import DesignSession, SessionConfig

__all__ = [
    "ComponentConfig",
    "ComponentType",
    "DesignSession",
    "EnginePerformance",
    "SessionConfig",
    "SizeClass",
    "calculate_performance",
]
