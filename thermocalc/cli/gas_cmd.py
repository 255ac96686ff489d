"""CLI command for ideal-gas processes."""

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
from thermocalc.core.ideal_gas import GasProcess, ideal_gas_process
from thermocalc.utils.units import QuantityKind
from thermocalc.utils.validation import validate_gas_process


@click.command("gas")
@click.option(
    "--process",
    type=click.Choice([p.value for p in GasProcess], case_sensitive=False),
    default="ISOTHERMAL",
    show_default=True,
    help="Process path.",
)
@click.option("--p1", type=float, default=100.0, show_default=True, help="Initial pressure [kPa | psi].")
@click.option("--v1", type=float, default=1.0, show_default=True, help="Initial volume [m³ | ft³].")
@click.option("--t1", type=float, default=300.0, show_default=True, help="Initial temperature [K | °R].")
@click.option(
    "--param",
    type=float,
    default=2.0,
    show_default=True,
    help="Final pressure for ISOCHORIC, final volume otherwise.",
)
@click.option("--n", "n", type=float, default=1.3, show_default=True, help="Polytropic index.")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
@click.pass_context
def gas(
    ctx: click.Context,
    process: str,
    p1: float,
    v1: float,
    t1: float,
    param: float,
    n: float,
    output: str | None,
) -> None:
    """Ideal-gas process from state 1 to state 2."""
    console = get_console(ctx)
    system = get_units(ctx)
    process_kind = GasProcess(process.upper())

    param_kind = QuantityKind.PRESSURE if process_kind is GasProcess.ISOCHORIC else QuantityKind.VOLUME
    state = {"process": process_kind.value, "P1": p1, "V1": v1, "T1": t1, "param": param, "n": n}
    si = convert_inputs(
        state,
        {
            "P1": QuantityKind.PRESSURE,
            "V1": QuantityKind.VOLUME,
            "T1": QuantityKind.TEMP,
            "param": param_kind,
        },
        system,
    )
    check_inputs(console, validate_gas_process(si))

    result = ideal_gas_process(**si)

    console.print(f"\n[bold]ThermoCalc — Ideal Gas ({process_kind.value.title()})[/bold]\n")
    rows = [
        ("Final Pressure (P2)", result.P2, QuantityKind.PRESSURE),
        ("Final Volume (V2)", result.V2, QuantityKind.VOLUME),
        ("Final Temperature (T2)", result.T2, QuantityKind.TEMP),
        ("Boundary Work (W)", result.W, QuantityKind.ENERGY),
        ("Heat Transfer (Q)", result.Q, QuantityKind.ENERGY),
        ("Internal Energy Change (dU)", result.dU, QuantityKind.SPECIFIC_ENERGY),
    ]
    console.print(result_table("Process Result", rows, system))

    export_result(console, output, system, ModuleType.IDEAL_GAS, state, result)
