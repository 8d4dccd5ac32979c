"""Rocket Workshop command-line interface package.

Supports ``python -m rocket_workshop.cli`` as an alternative to the ``workshop`` entry point.
"""

from rocket_workshop.cli.main import cli, main

__all__ = ["cli", "main"]
