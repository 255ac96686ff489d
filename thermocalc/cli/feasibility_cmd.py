"""CLI command for the second-law feasibility check."""

from __future__ import annotations

import click

from thermocalc.cli.output import (
    check_inputs,
    convert_inputs,
    export_result,
    get_console,
    get_units,
    result_table,
)
from thermocalc.core.entropy import FeasibilityStatus, validate_process
from thermocalc.core.export import ModuleType
from thermocalc.utils.units import QuantityKind
from thermocalc.utils.validation import validate_feasibility

_STATUS_STYLE = {
    FeasibilityStatus.POSSIBLE: "green",
    FeasibilityStatus.REVERSIBLE: "cyan",
    FeasibilityStatus.IMPOSSIBLE: "bold red",
}


@click.command("feasibility")
@click.option("--p1", type=float, default=100.0, show_default=True, help="Initial pressure [kPa | psi].")
@click.option("--t1", type=float, default=300.0, show_default=True, help="Initial temperature [K | °R].")
@click.option("--p2", type=float, default=500.0, show_default=True, help="Final pressure [kPa | psi].")
@click.option("--t2", type=float, default=600.0, show_default=True, help="Final temperature [K | °R].")
@click.option("--q", "q", type=float, default=0.0, show_default=True, help="Heat to the system [kJ/kg | BTU/lb].")
@click.option("--t-surr", type=float, default=298.0, show_default=True, help="Surroundings temperature [K | °R].")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
@click.pass_context
def feasibility(
    ctx: click.Context,
    p1: float,
    t1: float,
    p2: float,
    t2: float,
    q: float,
    t_surr: float,
    output: str | None,
) -> None:
    """Second-law check of a process between two ideal-gas states."""
    console = get_console(ctx)
    system = get_units(ctx)

    state = {"P1": p1, "T1": t1, "P2": p2, "T2": t2, "Q": q, "T_surr": t_surr}
    si = convert_inputs(
        state,
        {
            "P1": QuantityKind.PRESSURE,
            "P2": QuantityKind.PRESSURE,
            "T1": QuantityKind.TEMP,
            "T2": QuantityKind.TEMP,
            "T_surr": QuantityKind.TEMP,
            "Q": QuantityKind.SPECIFIC_ENERGY,
        },
        system,
    )
    check_inputs(console, validate_feasibility(si))

    result = validate_process(**si)

    s = QuantityKind.SPECIFIC_HEAT  # entropy per unit mass shares its dimension
    console.print("\n[bold]ThermoCalc — Second-Law Check[/bold]\n")
    rows = [
        ("System Entropy Change", result.dS_sys, s),
        ("Surroundings Entropy Change", result.dS_surr, s),
        ("Entropy Generation", result.S_gen, s),
    ]
    console.print(result_table("Entropy Balance", rows, system))
    style = _STATUS_STYLE[result.status]
    console.print(f"Status: [{style}]{result.status.value}[/{style}]")
    export_result(console, output, system, ModuleType.VALIDATION, state, result)
