"""CLI commands for power cycle analysis."""

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
from thermocalc.core.cycles import CycleType, analyze_cycle
from thermocalc.core.diagrams import brayton_pv_diagram, otto_pv_diagram, rankine_ts_diagram
from thermocalc.core.export import ModuleType, save_diagram_json
from thermocalc.utils.units import QuantityKind
from thermocalc.utils.validation import (
    validate_brayton,
    validate_diesel,
    validate_otto,
    validate_rankine,
)

_T = QuantityKind.TEMP
_TC = QuantityKind.TEMP_C
_P = QuantityKind.PRESSURE
_E = QuantityKind.SPECIFIC_ENERGY

_diagram_option = click.option(
    "--diagram", type=click.Path(), default=None, help="Write plot data to this file (JSON)."
)
_output_option = click.option(
    "--output", "-o", type=click.Path(), default=None, help="Output file (JSON)."
)


@click.group("cycle")
@click.pass_context
def cycle(ctx: click.Context) -> None:
    """Power cycle analysis commands."""
    pass


def _run(ctx, cycle_type, state, kinds, validator, rows_for, output):
    console = get_console(ctx)
    system = get_units(ctx)

    si = convert_inputs(state, kinds, system)
    check_inputs(console, validator(si))
    result = analyze_cycle(cycle_type, **si)

    console.print(f"\n[bold]ThermoCalc — {cycle_type.value.title()} Cycle[/bold]\n")
    console.print(result_table("Cycle Performance", rows_for(result), system))
    export_result(console, output, system, ModuleType.CYCLES, state, result, cycle_type=cycle_type)
    return si, result


@cycle.command("otto")
@click.option("--r", "r", type=float, default=8.0, show_default=True, help="Compression ratio.")
@click.option("--t1", type=float, default=300.0, show_default=True, help="Intake temperature [K | °R].")
@click.option("--p1", type=float, default=100.0, show_default=True, help="Intake pressure [kPa | psi].")
@click.option("--q-in", type=float, default=800.0, show_default=True, help="Heat added [kJ/kg | BTU/lb].")
@_diagram_option
@_output_option
@click.pass_context
def otto_cmd(ctx, r, t1, p1, q_in, diagram, output) -> None:
    """Air-standard Otto cycle."""
    state = {"r": r, "T1": t1, "P1": p1, "q_in": q_in}
    si, _ = _run(
        ctx, CycleType.OTTO, state,
        {"T1": _T, "P1": _P, "q_in": _E},
        validate_otto,
        lambda res: [
            ("T2", res.T2, _T), ("T3", res.T3, _T), ("T4", res.T4, _T),
            ("P2", res.P2, _P), ("P3", res.P3, _P), ("P4", res.P4, _P),
            ("Net Work", res.w_net, _E),
            ("Thermal Efficiency", res.efficiency, "%"),
            ("Mean Effective Pressure", res.MEP, _P),
        ],
        output,
    )
    if diagram:
        save_diagram_json(otto_pv_diagram(si["r"], si["P1"]), diagram)


@cycle.command("diesel")
@click.option("--r", "r", type=float, default=18.0, show_default=True, help="Compression ratio.")
@click.option("--rc", type=float, default=2.0, show_default=True, help="Cut-off ratio.")
@click.option("--t1", type=float, default=300.0, show_default=True, help="Intake temperature [K | °R].")
@click.option("--p1", type=float, default=100.0, show_default=True, help="Intake pressure [kPa | psi].")
@_output_option
@click.pass_context
def diesel_cmd(ctx, r, rc, t1, p1, output) -> None:
    """Air-standard Diesel cycle."""
    state = {"r": r, "rc": rc, "T1": t1, "P1": p1}
    _run(
        ctx, CycleType.DIESEL, state,
        {"T1": _T, "P1": _P},
        validate_diesel,
        lambda res: [
            ("T2", res.T2, _T), ("T3", res.T3, _T), ("T4", res.T4, _T),
            ("P2", res.P2, _P), ("P3", res.P3, _P), ("P4", res.P4, _P),
            ("Heat Added", res.q_in, _E),
            ("Heat Rejected", res.q_out, _E),
            ("Net Work", res.w_net, _E),
            ("Thermal Efficiency", res.efficiency, "%"),
            ("Mean Effective Pressure", res.MEP, _P),
        ],
        output,
    )


@cycle.command("brayton")
@click.option("--rp", type=float, default=10.0, show_default=True, help="Pressure ratio.")
@click.option("--t1", type=float, default=300.0, show_default=True, help="Compressor inlet temperature [K | °R].")
@click.option("--t3", type=float, default=1300.0, show_default=True, help="Turbine inlet temperature [K | °R].")
@click.option("--p1", type=float, default=100.0, show_default=True, help="Compressor inlet pressure [kPa | psi].")
@_diagram_option
@_output_option
@click.pass_context
def brayton_cmd(ctx, rp, t1, t3, p1, diagram, output) -> None:
    """Ideal Brayton gas-turbine cycle."""
    state = {"rp": rp, "T1": t1, "T3": t3, "P1": p1}
    si, _ = _run(
        ctx, CycleType.BRAYTON, state,
        {"T1": _T, "T3": _T, "P1": _P},
        validate_brayton,
        lambda res: [
            ("T2", res.T2, _T), ("T4", res.T4, _T),
            ("P2", res.P2, _P), ("P3", res.P3, _P), ("P4", res.P4, _P),
            ("Compressor Work", res.w_comp, _E),
            ("Turbine Work", res.w_turb, _E),
            ("Net Work", res.w_net, _E),
            ("Heat Added", res.q_in, _E),
            ("Thermal Efficiency", res.efficiency, "%"),
            ("Back-Work Ratio", res.bwr, "—"),
        ],
        output,
    )
    if diagram:
        save_diagram_json(brayton_pv_diagram(si["rp"], si["P1"]), diagram)


@cycle.command("rankine")
@click.option("--t3", type=float, default=500.0, show_default=True, help="Turbine inlet temperature [°C | °F].")
@click.option("--p3", type=float, default=8000.0, show_default=True, help="Boiler pressure [kPa | psi].")
@click.option("--p1", type=float, default=10.0, show_default=True, help="Condenser pressure [kPa | psi].")
@click.option("--w-pump", type=float, default=8.0, show_default=True, help="Pump work [kJ/kg | BTU/lb].")
@click.option("--q-in", type=float, default=2800.0, show_default=True, help="Boiler heat input [kJ/kg | BTU/lb].")
@click.option("--m-dot", type=float, default=50.0, show_default=True, help="Mass flow rate [kg/s | lb/s].")
@_diagram_option
@_output_option
@click.pass_context
def rankine_cmd(ctx, t3, p3, p1, w_pump, q_in, m_dot, diagram, output) -> None:
    """Rankine steam cycle (superheated-steam approximation)."""
    state = {"T3": t3, "P3": p3, "P1": p1, "w_pump": w_pump, "q_in": q_in, "m_dot": m_dot}
    si, result = _run(
        ctx, CycleType.RANKINE, state,
        {"T3": _TC, "P3": _P, "P1": _P, "w_pump": _E, "q_in": _E, "m_dot": QuantityKind.MASS_FLOW},
        validate_rankine,
        lambda res: [
            ("Turbine Work", res.w_turbine, _E),
            ("Net Work", res.w_net, _E),
            ("Thermal Efficiency", res.efficiency, "%"),
            ("Power Output", res.power_output, QuantityKind.POWER),
        ],
        output,
    )

    console = get_console(ctx)
    system = get_units(ctx)
    states = [
        row
        for i, point in enumerate(result.states, start=1)
        for row in (
            (f"State {i} Pressure ({point.phase})", point.P, _P),
            (f"State {i} Temperature", point.T, _TC),
        )
    ]
    console.print(result_table("State Points", states, system))

    if diagram:
        save_diagram_json(rankine_ts_diagram(si["T3"]), diagram)
