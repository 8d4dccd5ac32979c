"""CLI command for listing propellants, materials and components."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from rocket_workshop.core.components import COMPONENT_DEFINITIONS
from rocket_workshop.core.materials import get_material, list_materials
from rocket_workshop.core.propellants import get_propellant, list_propellants


@click.group("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Inspect the propellant, material and component catalogs."""
    pass


@info.command("propellants")
@click.pass_context
def info_propellants(ctx: click.Context) -> None:
    """List available propellant combinations."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Available Propellants")
    table.add_column("Key", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Isp SL [s]", justify="right")
    table.add_column("Isp vac [s]", justify="right")
    table.add_column("O/F", justify="right")
    table.add_column("c* [m/s]", justify="right")
    table.add_column("Tc [K]", justify="right")

    for key in list_propellants():
        prop = get_propellant(key)
        table.add_row(
            key,
            prop.name,
            f"{prop.specific_impulse_sea_level:.0f}",
            f"{prop.specific_impulse_vacuum:.0f}",
            f"{prop.optimal_mixture_ratio:.2f}",
            f"{prop.characteristic_velocity:.0f}",
            f"{prop.combustion_temperature:.0f}",
        )
    console.print(table)


@info.command("materials")
@click.pass_context
def info_materials(ctx: click.Context) -> None:
    """List available materials."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Available Materials")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Density [kg/m³]", justify="right")
    table.add_column("Max Temp [K]", justify="right")
    table.add_column("Yield [MPa]", justify="right")
    table.add_column("Cost [$/kg]", justify="right")

    for mat_id in list_materials():
        mat = get_material(mat_id)
        table.add_row(
            mat_id,
            mat.name,
            f"{mat.density:.0f}",
            f"{mat.max_temperature:.0f}",
            f"{mat.yield_strength:.0f}",
            f"{mat.cost_per_kg:.0f}",
        )
    console.print(table)


@info.command("components")
@click.pass_context
def info_components(ctx: click.Context) -> None:
    """List component types with their tunable properties."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Engine Components")
    table.add_column("Type", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Base Cost [$]", justify="right")
    table.add_column("Base Mass [kg]", justify="right")
    table.add_column("Properties", style="yellow")

    for ctype, definition in COMPONENT_DEFINITIONS.items():
        props = "\n".join(
            f"{key}: {rng.minimum:g}–{rng.maximum:g} {rng.unit} "
            f"(default {definition.default_properties[key]:g})"
            for key, rng in definition.property_ranges.items()
        )
        table.add_row(
            ctype.value,
            definition.name,
            f"{definition.base_cost:,.0f}",
            f"{definition.base_mass:.0f}",
            props,
        )
    console.print(table)
