"""Shared helpers for CLI commands: unit handling, tables and export."""

from __future__ import annotations

from typing import Any, Iterable

import click
from rich.console import Console
from rich.table import Table

from thermocalc.core.export import ModuleType, build_export, save_export_json
from thermocalc.utils.units import QuantityKind, UnitSystem, from_si, to_si, unit_label
from thermocalc.utils.validation import ValidationResult

# (label, SI value, quantity kind or fixed unit string)
Row = tuple[str, float, Any]


def get_console(ctx: click.Context) -> Console:
    return ctx.obj.get("console", Console())


def get_units(ctx: click.Context) -> UnitSystem:
    return ctx.obj.get("units", UnitSystem.SI)


def convert_inputs(
    values: dict[str, float],
    kinds: dict[str, QuantityKind],
    system: UnitSystem,
) -> dict[str, float]:
    """Convert user inputs to SI; names without a kind pass through."""
    return {
        name: to_si(value, kinds[name], system) if name in kinds else value
        for name, value in values.items()
    }


def check_inputs(console: Console, validation: ValidationResult) -> None:
    """Print validation findings and abort on errors."""
    for msg in validation.infos:
        console.print(f"[dim]Note:[/dim] {msg.message}")
    for msg in validation.warnings:
        console.print(f"[yellow]Warning:[/yellow] {msg.message}")
    if not validation.is_valid:
        for msg in validation.errors:
            console.print(f"[red]Error:[/red] {msg.message}")
        raise click.ClickException("Invalid input, calculation not run")


def result_table(title: str, rows: Iterable[Row], system: UnitSystem) -> Table:
    """Build a Parameter / Value / Unit table, converting SI values to *system*."""
    table = Table(title=title)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    for label, value, unit in rows:
        if isinstance(unit, QuantityKind):
            value = from_si(value, unit, system)
            unit = unit_label(unit, system)
        table.add_row(label, f"{value:.4g}", unit)
    return table


def export_result(
    console: Console,
    output: str | None,
    system: UnitSystem,
    module: ModuleType,
    state: dict[str, Any],
    result: Any,
    cycle_type: Any = None,
) -> None:
    if not output:
        return
    data = build_export(system, module, state=state, result=result, cycle_type=cycle_type)
    save_export_json(data, output)
    console.print(f"\n[dim]Saved to {output}[/dim]")
