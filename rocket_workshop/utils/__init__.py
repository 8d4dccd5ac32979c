"""Utility modules for Rocket Workshop."""

from rocket_workshop.utils.constants import G_0, MPA_TO_PA
from rocket_workshop.utils.units import convert, get_unit_registry

__all__ = ["G_0", "MPA_TO_PA", "convert", "get_unit_registry"]
