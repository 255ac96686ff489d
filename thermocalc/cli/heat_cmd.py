"""CLI commands for heat exchangers and heat transfer modes."""

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
from thermocalc.core.heat_exchanger import heat_exchanger
from thermocalc.core.heat_transfer import conduction as conduction_calc
from thermocalc.core.heat_transfer import convection as convection_calc
from thermocalc.core.heat_transfer import radiation as radiation_calc
from thermocalc.utils.units import QuantityKind, to_si
from thermocalc.utils.validation import (
    validate_conduction,
    validate_convection,
    validate_heat_exchanger,
    validate_radiation,
)

_TC = QuantityKind.TEMP_C
_output_option = click.option(
    "--output", "-o", type=click.Path(), default=None, help="Output file (JSON)."
)


@click.command("hx")
@click.option("--mh", type=float, default=2.5, show_default=True, help="Hot mass flow [kg/s | lb/s].")
@click.option("--cph", type=float, default=4.18, show_default=True, help="Hot specific heat [kJ/kg·K | BTU/lb·°F].")
@click.option("--th-in", type=float, default=90.0, show_default=True, help="Hot inlet temperature [°C | °F].")
@click.option("--th-out", type=float, default=40.0, show_default=True, help="Hot outlet temperature [°C | °F].")
@click.option("--mc", type=float, default=5.0, show_default=True, help="Cold mass flow [kg/s | lb/s].")
@click.option("--cpc", type=float, default=4.18, show_default=True, help="Cold specific heat [kJ/kg·K | BTU/lb·°F].")
@click.option("--tc-in", type=float, default=20.0, show_default=True, help="Cold inlet temperature [°C | °F].")
@click.option("--ua", type=float, default=50.0, show_default=True, help="Overall conductance UA [kW/K | BTU/hr·°F].")
@_output_option
@click.pass_context
def hx(ctx, mh, cph, th_in, th_out, mc, cpc, tc_in, ua, output) -> None:
    """Counter-flow heat exchanger (LMTD and effectiveness-NTU)."""
    console = get_console(ctx)
    system = get_units(ctx)

    state = {
        "mh": mh, "cph": cph, "Th_in": th_in, "Th_out": th_out,
        "mc": mc, "cpc": cpc, "Tc_in": tc_in, "UA": ua,
    }
    si = convert_inputs(
        state,
        {
            "mh": QuantityKind.MASS_FLOW,
            "mc": QuantityKind.MASS_FLOW,
            "cph": QuantityKind.SPECIFIC_HEAT,
            "cpc": QuantityKind.SPECIFIC_HEAT,
            "Th_in": _TC,
            "Th_out": _TC,
            "Tc_in": _TC,
            "UA": QuantityKind.CONDUCTANCE,
        },
        system,
    )
    check_inputs(console, validate_heat_exchanger(si))

    result = heat_exchanger(**si)

    console.print("\n[bold]ThermoCalc — Heat Exchanger[/bold]\n")
    rows = [
        ("Heat Duty (Q)", result.Q, QuantityKind.POWER),
        ("Cold Outlet Temperature", result.Tc_out, _TC),
        # A temperature difference converts by scale only
        ("LMTD", result.LMTD, QuantityKind.TEMP),
        ("NTU", result.NTU, "—"),
        ("Capacity Ratio (Cr)", result.C_r, "—"),
        ("Effectiveness", result.epsilon, "%"),
    ]
    console.print(result_table("Exchanger Rating", rows, system))
    export_result(console, output, system, ModuleType.HEAT_EXCHANGER, state, result)


@click.command("conduction")
@click.option(
    "--layer",
    "layers",
    type=(float, float),
    multiple=True,
    help="Layer THICKNESS [m | ft] and conductivity K [W/m·K]; repeat, inside first.",
)
@click.option("--t-in", type=float, default=20.0, show_default=True, help="Inside temperature [°C | °F].")
@click.option("--t-out", type=float, default=-5.0, show_default=True, help="Outside temperature [°C | °F].")
@click.option("--area", type=float, default=1.0, show_default=True, help="Wall area [m² | ft²].")
@_output_option
@click.pass_context
def conduction(ctx, layers, t_in, t_out, area, output) -> None:
    """Steady conduction through a composite wall."""
    console = get_console(ctx)
    system = get_units(ctx)

    if not layers:
        layers = ((0.2, 0.8), (0.05, 0.04))  # brick + insulation

    state = {
        "layers": [{"thickness": t, "k": k} for t, k in layers],
        "T_in": t_in,
        "T_out": t_out,
        "area": area,
    }
    si = convert_inputs(
        {"T_in": t_in, "T_out": t_out, "area": area},
        {"T_in": _TC, "T_out": _TC, "area": QuantityKind.AREA},
        system,
    )
    si["layers"] = [(to_si(t, QuantityKind.LENGTH, system), k) for t, k in layers]
    check_inputs(console, validate_conduction(si))

    result = conduction_calc(**si)

    console.print("\n[bold]ThermoCalc — Conduction[/bold]\n")
    rows = [
        ("Heat Rate (Q)", result.Q_dot, "W"),
        ("Total Resistance", result.R_total, "K/W"),
    ]
    rows += [(f"Node {i} Temperature", T, _TC) for i, T in enumerate(result.temperatures)]
    console.print(result_table("Wall Profile", rows, system))
    export_result(console, output, system, ModuleType.CONDUCTION, state, result)


@click.command("convection")
@click.option("--h", "h", type=float, default=25.0, show_default=True, help="Heat transfer coefficient [W/m²K | BTU/hr·ft²·°F].")
@click.option("--t-surf", type=float, default=100.0, show_default=True, help="Surface temperature [°C | °F].")
@click.option("--t-inf", type=float, default=25.0, show_default=True, help="Fluid temperature [°C | °F].")
@click.option("--area", type=float, default=1.0, show_default=True, help="Surface area [m² | ft²].")
@_output_option
@click.pass_context
def convection(ctx, h, t_surf, t_inf, area, output) -> None:
    """Newton's law of cooling."""
    console = get_console(ctx)
    system = get_units(ctx)

    state = {"h": h, "T_surf": t_surf, "T_inf": t_inf, "area": area}
    si = convert_inputs(
        state,
        {"h": QuantityKind.U_VALUE, "T_surf": _TC, "T_inf": _TC, "area": QuantityKind.AREA},
        system,
    )
    check_inputs(console, validate_convection(si))

    Q_dot = convection_calc(**si)

    console.print("\n[bold]ThermoCalc — Convection[/bold]\n")
    console.print(result_table("Convection", [("Heat Rate (Q)", Q_dot, "W")], system))
    export_result(console, output, system, ModuleType.CONVECTION, state, {"Q_dot": Q_dot})


@click.command("radiation")
@click.option("--emissivity", type=float, default=0.8, show_default=True, help="Surface emissivity.")
@click.option("--t-surf", type=float, default=500.0, show_default=True, help="Surface temperature [°C | °F].")
@click.option("--t-surr", type=float, default=30.0, show_default=True, help="Surroundings temperature [°C | °F].")
@click.option("--area", type=float, default=1.0, show_default=True, help="Surface area [m² | ft²].")
@_output_option
@click.pass_context
def radiation(ctx, emissivity, t_surf, t_surr, area, output) -> None:
    """Net Stefan-Boltzmann radiation to surroundings."""
    console = get_console(ctx)
    system = get_units(ctx)

    state = {"emissivity": emissivity, "T_surf": t_surf, "T_surr": t_surr, "area": area}
    si = convert_inputs(
        state,
        {"T_surf": _TC, "T_surr": _TC, "area": QuantityKind.AREA},
        system,
    )
    check_inputs(console, validate_radiation(si))

    Q_dot = radiation_calc(**si)

    console.print("\n[bold]ThermoCalc — Radiation[/bold]\n")
    console.print(result_table("Radiation", [("Heat Rate (Q)", Q_dot, "W")], system))
    export_result(console, output, system, ModuleType.RADIATION, state, {"Q_dot": Q_dot})
