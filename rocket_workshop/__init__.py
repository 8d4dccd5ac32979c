"""Rocket Workshop: engine component design and performance calculator."""

__app_name__ = "Rocket Workshop"
__version__ = "0.1.0"
