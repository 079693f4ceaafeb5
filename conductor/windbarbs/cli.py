#!/usr/bin/env python3
# Mariner's AI Grid - Wind Barb CLI
# SPDX-License-Identifier: Apache-2.0

"""
Command-line interface for the wind barb symbol engine.

Usage:
    mag-windbarbs resolve "windbarbs://default(15)[kts]"
    mag-windbarbs table
    mag-windbarbs export --output ../assets/wind-barbs
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


@click.group()
@click.version_option(version="0.1.0", prog_name="mag-windbarbs")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """
    Mariner's AI Grid - Wind Barb Symbols

    Resolve windbarbs:// locators to vector glyphs and export map icons.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


@main.command()
@click.argument("locators", nargs=-1, required=True)
def resolve(locators: tuple[str, ...]):
    """
    Resolve one or more locators and print their glyphs as WKT.

    Example:
        mag-windbarbs resolve "windbarbs://default(12)[m/s]?hemisphere=s"
    """
    from windbarbs.errors import WindBarbError
    from windbarbs.factory import WindBarbsFactory
    from windbarbs.glyph import to_wkt

    factory = WindBarbsFactory()

    table = Table(title="Wind Barbs")
    table.add_column("Locator", style="cyan")
    table.add_column("Knots", style="green", justify="right")
    table.add_column("Symbol", style="yellow")
    table.add_column("Elements", style="magenta")
    table.add_column("WKT", style="dim")

    for text in locators:
        try:
            resolved = factory.resolve_symbol(text)
        except WindBarbError as e:
            table.add_row(escape(text), "-", "[red]no shape[/]", "", escape(str(e)))
            continue

        decomposition = resolved.decomposition
        elements = (
            f"{decomposition.pennants}P {decomposition.long_barbs}L {decomposition.short_barbs}S"
            if decomposition is not None else ""
        )
        symbol = str(resolved.bucket) + (" (S)" if resolved.mirrored else "")
        table.add_row(
            escape(text),
            f"{resolved.knots:.2f}",
            symbol,
            elements,
            to_wkt(resolved.glyph, precision=2),
        )

    console.print(table)


@main.command("table")
@click.option("--set", "symbol_set", type=str, default="default",
              help="Symbol set name (default: default)")
def bucket_table(symbol_set: str):
    """
    Show which speeds map to which symbol.
    """
    import math

    from windbarbs.cache import get_symbol_set
    from windbarbs.classifier import BucketKind, decompose
    from windbarbs.definitions import CALM_THRESHOLD_KNOTS, SHORT_BARB_KNOTS
    from windbarbs.errors import UnknownSymbolSetError

    try:
        selected = get_symbol_set(symbol_set)
    except UnknownSymbolSetError as e:
        console.print(f"[red]Error: {e}[/]")
        sys.exit(1)

    definition = selected.definition

    table = Table(title=f"Symbol set: {selected.name}")
    table.add_column("Symbol", style="cyan")
    table.add_column("Speed (kn)", style="green")
    table.add_column("Pennants", justify="right")
    table.add_column("Long", justify="right")
    table.add_column("Short", justify="right")

    table.add_row("Calm", f"< {CALM_THRESHOLD_KNOTS:g}", "", "", "")
    for bucket in selected.cache.glyphs:
        if bucket.kind is not BucketKind.FAMILY or bucket.family == 0:
            continue
        low = bucket.family - SHORT_BARB_KNOTS + CALM_THRESHOLD_KNOTS
        high = low + SHORT_BARB_KNOTS
        parts = decompose(bucket.family)
        table.add_row(
            f"{bucket.family} kn",
            f"{low:g} - {high:g}",
            str(parts.pennants),
            str(parts.long_barbs),
            str(parts.short_barbs),
        )
    table.add_row("No data", "NaN", "", "", "")
    table.add_row(
        "[red]Invalid[/]",
        f">= {definition.max_family + CALM_THRESHOLD_KNOTS:g}, {math.inf}",
        "", "", "",
    )

    console.print(table)
    console.print(Panel.fit(
        f"Shaft: {definition.vector_length}  "
        f"Long barb: {definition.long_barb_length}  "
        f"Short barb: {definition.short_barb_length:g}\n"
        f"Pennant base: {definition.base_pennant_length}  "
        f"Spacing: {definition.elements_spacing}  "
        f"Calm: {definition.zero_wind_radius}",
        title="Geometry",
        border_style="blue",
    ))


@main.command()
@click.option("--output", "-o", type=Path, default=Path("../assets/wind-barbs"),
              help="Output directory (default: ../assets/wind-barbs)")
@click.option("--size", type=click.IntRange(min=9), default=64,
              help="Icon size in pixels (default: 64, minimum: 9)")
@click.option("--set", "symbol_set", type=str, default="default",
              help="Symbol set name (default: default)")
@click.option("--southern", is_flag=True, help="Mirror icons for the southern hemisphere")
def export(output: Path, size: int, symbol_set: str, southern: bool):
    """
    Export PNG icons for every symbol of a set.
    """
    from windbarbs.errors import UnknownSymbolSetError
    from windbarbs.export import export_icons

    try:
        paths = export_icons(output, symbol_set=symbol_set, size=size, southern=southern)
    except UnknownSymbolSetError as e:
        console.print(f"[red]Error: {e}[/]")
        sys.exit(1)

    console.print(f"\n[bold green]Success![/] {len(paths)} icons written")
    console.print(f"[dim]Files saved to: {output.absolute()}[/]")


if __name__ == "__main__":
    main()
