"""ThermoCalc command-line interface.

Entry point for the ``thermocalc`` CLI tool. Inputs are entered in the
unit system chosen with ``--units``; they are converted to SI before the
calculators run and results are converted back for display.
"""

from __future__ import annotations

import click
from rich.console import Console

from thermocalc import __app_name__, __version__
from thermocalc.utils.units import UnitSystem

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option(
    "--units",
    type=click.Choice(["si", "imperial"], case_sensitive=False),
    default="si",
    show_default=True,
    help="Unit system for inputs and displayed results.",
)
@click.pass_context
def cli(ctx: click.Context, units: str) -> None:
    """ThermoCalc — engineering thermodynamics calculator.

    Ideal-gas processes, power and refrigeration cycles, heat
    exchangers, heat transfer and second-law checks.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    ctx.obj["units"] = UnitSystem(units)


# Import and register sub-commands
from thermocalc.cli.gas_cmd import gas  # noqa: E402
from thermocalc.cli.cycle_cmd import cycle  # noqa: E402
from thermocalc.cli.heat_cmd import conduction, convection, hx, radiation  # noqa: E402
from thermocalc.cli.refrigeration_cmd import refrigeration  # noqa: E402
from thermocalc.cli.feasibility_cmd import feasibility  # noqa: E402

cli.add_command(gas)
cli.add_command(cycle)
cli.add_command(hx)
cli.add_command(refrigeration)
cli.add_command(conduction)
cli.add_command(convection)
cli.add_command(radiation)
cli.add_command(feasibility)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
