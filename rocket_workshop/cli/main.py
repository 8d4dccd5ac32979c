"""Rocket Workshop command-line interface.

Entry point for the ``workshop`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from rocket_workshop import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Rocket Workshop: engine component design and performance.

    Assemble an engine from catalog components and evaluate its thrust,
    efficiency, mass budget and cost.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# Import and register sub-command groups
from rocket_workshop.cli.evaluate_cmd import evaluate  # noqa: E402
from rocket_workshop.cli.info_cmd import info  # noqa: E402
from rocket_workshop.cli.sweep_cmd import sweep  # noqa: E402

cli.add_command(evaluate)
cli.add_command(info)
cli.add_command(sweep)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
