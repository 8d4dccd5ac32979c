"""CLI command for evaluating a complete engine design."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from rocket_workshop.core.components import ComponentType
from rocket_workshop.core.performance import EnginePerformance
from rocket_workshop.core.propellants import list_propellants
from rocket_workshop.core.session import DesignSession, SessionConfig
from rocket_workshop.utils.units import convert, force_from_si, mass_from_si, pressure_from_si


def parse_property_override(text: str) -> tuple[ComponentType, str, float]:
    """Parse ``TYPE.KEY=VALUE``, e.g. ``nozzle.expansion_ratio=20``.

    Raises:
        click.BadParameter: On malformed input or an unknown component type.
    """
    target, sep, raw_value = text.partition("=")
    type_name, dot, key = target.partition(".")
    if not sep or not dot or not key:
        raise click.BadParameter(f"Expected TYPE.KEY=VALUE, got '{text}'")
    try:
        component_type = ComponentType(type_name.strip())
    except ValueError:
        choices = ", ".join(t.value for t in ComponentType)
        raise click.BadParameter(f"Unknown component type '{type_name}'. Choose from: {choices}")
    try:
        value = float(raw_value)
    except ValueError:
        raise click.BadParameter(f"Value for {target} must be a number, got '{raw_value}'")
    return component_type, key.strip(), value


def parse_material_override(text: str) -> tuple[ComponentType, str]:
    """Parse ``TYPE=MATERIAL``, e.g. ``fuel_tank=aluminum``."""
    type_name, sep, material = text.partition("=")
    if not sep or not material:
        raise click.BadParameter(f"Expected TYPE=MATERIAL, got '{text}'")
    try:
        return ComponentType(type_name.strip()), material.strip()
    except ValueError:
        choices = ", ".join(t.value for t in ComponentType)
        raise click.BadParameter(f"Unknown component type '{type_name}'. Choose from: {choices}")


def build_session(
    propellant: str,
    material: str,
    budget: float,
    overrides: tuple[str, ...] = (),
    material_overrides: tuple[str, ...] = (),
) -> DesignSession:
    """Assemble a complete default engine and apply command-line overrides."""
    try:
        session = DesignSession(
            SessionConfig(total_budget=budget, propellant=propellant, default_material=material)
        )
    except KeyError as exc:
        raise click.BadParameter(str(exc.args[0]))
    session.add_required_components()

    by_type = {c.type: c for c in session.components}
    for text in material_overrides:
        component_type, mat = parse_material_override(text)
        try:
            session.update_component(by_type[component_type].id, material=mat)
        except KeyError as exc:
            raise click.BadParameter(str(exc.args[0]))
    for text in overrides:
        component_type, key, value = parse_property_override(text)
        try:
            session.set_property(by_type[component_type].id, key, value)
        except KeyError as exc:
            raise click.BadParameter(str(exc.args[0]))
    return session


def performance_table(perf: EnginePerformance, units: str = "si") -> Table:
    """Render a performance record as a rich table."""
    table = Table(title="Engine Performance")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    if units == "imperial":
        table.add_row("Thrust", f"{force_from_si(perf.thrust * 1e3, 'lbf'):,.0f}", "lbf")
        table.add_row("Exit Velocity", f"{convert(perf.exit_velocity, 'm/s', 'ft/s'):.0f}", "ft/s")
        table.add_row("Mass Flow Rate", f"{convert(perf.mass_flow_rate, 'kg/s', 'lb/s'):.2f}", "lb/s")
        table.add_row("Chamber Pressure", f"{pressure_from_si(perf.chamber_pressure * 1e6, 'psi'):.0f}", "psi")
        table.add_row("Dry Mass", f"{mass_from_si(perf.dry_mass, 'lb'):.0f}", "lb")
        table.add_row("Propellant Mass", f"{mass_from_si(perf.propellant_mass, 'lb'):.0f}", "lb")
        table.add_row("Total Mass", f"{mass_from_si(perf.total_mass, 'lb'):.0f}", "lb")
    else:
        table.add_row("Thrust", f"{perf.thrust:.2f}", "kN")
        table.add_row("Exit Velocity", f"{perf.exit_velocity:.0f}", "m/s")
        table.add_row("Mass Flow Rate", f"{perf.mass_flow_rate:.2f}", "kg/s")
        table.add_row("Chamber Pressure", f"{perf.chamber_pressure:.1f}", "MPa")
        table.add_row("Dry Mass", f"{perf.dry_mass:.0f}", "kg")
        table.add_row("Propellant Mass", f"{perf.propellant_mass:.0f}", "kg")
        table.add_row("Total Mass", f"{perf.total_mass:.0f}", "kg")
    table.add_row("Specific Impulse", f"{perf.specific_impulse:.1f}", "s")
    table.add_row("Thrust-to-Weight", f"{perf.thrust_to_weight:.2f}", "—")
    table.add_row("Burn Time", f"{perf.burn_time:.1f}", "s")
    table.add_row("Mixture Ratio (O/F)", f"{perf.mixture_ratio:.2f}", "—")
    table.add_row("Overall Efficiency", f"{perf.overall_efficiency:.3f}", "—")
    table.add_row("Total Cost", f"{perf.total_cost:,.0f}", "$")
    return table


@click.command("evaluate")
@click.option(
    "--propellant",
    type=click.Choice(list_propellants(), case_sensitive=False),
    default="RP1-LOX",
    show_default=True,
    help="Propellant combination.",
)
@click.option(
    "--material", type=str, default="steel", show_default=True, help="Material for all components."
)
@click.option(
    "--component-material",
    "material_overrides",
    multiple=True,
    metavar="TYPE=MATERIAL",
    help="Material for one component, e.g. fuel_tank=aluminum. Repeatable.",
)
@click.option(
    "--set",
    "overrides",
    multiple=True,
    metavar="TYPE.KEY=VALUE",
    help="Override a property, e.g. combustion_chamber.chamber_pressure=9. Repeatable.",
)
@click.option(
    "--budget", type=float, default=150_000.0, show_default=True, help="Total budget [$]."
)
@click.option(
    "--units",
    type=click.Choice(["si", "imperial"]),
    default="si",
    show_default=True,
    help="Display units.",
)
@click.pass_context
def evaluate(
    ctx: click.Context,
    propellant: str,
    material: str,
    material_overrides: tuple[str, ...],
    overrides: tuple[str, ...],
    budget: float,
    units: str,
) -> None:
    """Evaluate a complete engine built from default components."""
    console: Console = ctx.obj.get("console", Console())
    session = build_session(propellant, material, budget, overrides, material_overrides)
    perf = session.performance

    console.print(f"\n[bold]Rocket Workshop: {session.propellant.name} Engine[/bold]\n")

    if not perf.is_valid:
        for error in perf.validation_errors:
            console.print(f"[red]Error:[/red] {error}")
        raise SystemExit(1)

    console.print(performance_table(perf, units))
    for warning in perf.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")

    status = "[green]ready[/green]" if session.is_ready_for_test() else "[red]over budget[/red]"
    console.print(
        f"\nBudget: {session.spent_budget:,.0f} / {session.total_budget:,.0f} $ ({status})"
    )
