"""CLI command for the vapour-compression refrigeration cycle."""

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
from thermocalc.core.export import ModuleType
from thermocalc.core.refrigeration import vapor_compression_cycle
from thermocalc.utils.units import QuantityKind
from thermocalc.utils.validation import validate_refrigeration


@click.command("refrigeration")
@click.option("--t-evap", type=float, default=-10.0, show_default=True, help="Evaporator temperature [°C | °F].")
@click.option("--t-cond", type=float, default=40.0, show_default=True, help="Condenser temperature [°C | °F].")
@click.option("--m-dot", type=float, default=0.1, show_default=True, help="Refrigerant flow [kg/s | lb/s].")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
@click.pass_context
def refrigeration(ctx: click.Context, t_evap: float, t_cond: float, m_dot: float, output: str | None) -> None:
    """Vapour-compression cycle (simplified enthalpy model)."""
    console = get_console(ctx)
    system = get_units(ctx)

    state = {"T_evap": t_evap, "T_cond": t_cond, "m_dot": m_dot}
    si = convert_inputs(
        state,
        {
            "T_evap": QuantityKind.TEMP_C,
            "T_cond": QuantityKind.TEMP_C,
            "m_dot": QuantityKind.MASS_FLOW,
        },
        system,
    )
    check_inputs(console, validate_refrigeration(si))

    result = vapor_compression_cycle(**si)

    e = QuantityKind.SPECIFIC_ENERGY
    console.print("\n[bold]ThermoCalc — Refrigeration[/bold]\n")
    rows = [
        ("Compressor Work", result.w_c, e),
        ("Refrigeration Effect", result.q_e, e),
        ("Condenser Heat", result.q_c, e),
        ("COP", result.COP, "—"),
        ("Cooling Capacity", result.capacity, QuantityKind.POWER),
    ]
    console.print(result_table("Cycle Performance", rows, system))
    export_result(console, output, system, ModuleType.REFRIGERATION, state, result)
