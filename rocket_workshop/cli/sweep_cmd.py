"""CLI command for single-property trade studies."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from rocket_workshop.cli.evaluate_cmd import build_session
from rocket_workshop.core.components import ComponentType
from rocket_workshop.core.propellants import list_propellants
from rocket_workshop.core.sweep import sweep_property


@click.command("sweep")
@click.argument("component_type", type=click.Choice([t.value for t in ComponentType]))
@click.argument("key")
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
    "--set",
    "overrides",
    multiple=True,
    metavar="TYPE.KEY=VALUE",
    help="Override a baseline property. Repeatable.",
)
@click.pass_context
def sweep(
    ctx: click.Context,
    component_type: str,
    key: str,
    propellant: str,
    material: str,
    overrides: tuple[str, ...],
) -> None:
    """Sweep KEY of COMPONENT_TYPE across its slider range."""
    console: Console = ctx.obj.get("console", Console())
    session = build_session(propellant, material, float("inf"), overrides)
    ctype = ComponentType(component_type)

    try:
        result = sweep_property(session.components, session.propellant, ctype, key)
    except KeyError as exc:
        raise click.BadParameter(str(exc.args[0]))

    table = Table(title=f"Sweep: {ctype.label} {key}")
    table.add_column(key, style="cyan", justify="right")
    table.add_column("Thrust [kN]", justify="right")
    table.add_column("Isp [s]", justify="right")
    table.add_column("T/W", justify="right")
    table.add_column("Burn [s]", justify="right")
    table.add_column("Cost [$]", justify="right")
    table.add_column("Status")

    for i, value in enumerate(result.values):
        if result.valid[i]:
            status = "[green]ok[/green]"
        else:
            status = f"[red]{result.performances[i].validation_errors[0]}[/red]"
        table.add_row(
            f"{value:g}",
            f"{result.thrust[i]:.1f}",
            f"{result.specific_impulse[i]:.1f}",
            f"{result.thrust_to_weight[i]:.2f}",
            f"{result.burn_time[i]:.1f}",
            f"{result.total_cost[i]:,.0f}",
            status,
        )
    console.print(table)

    best = result.best("thrust")
    if best is None:
        console.print("[red]No valid design in the sweep range.[/red]")
    else:
        console.print(f"Maximum thrust at {key} = {best:g}")
