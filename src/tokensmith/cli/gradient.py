"""
CLI command for gradient parsing.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from tokensmith.core.gradient import parse_gradient

console = Console()


def gradient_command(
    text: Annotated[str, typer.Argument(help="linear-gradient(...) string to parse")],
    output_json: Annotated[
        bool, typer.Option("--json", help="Output React Native props as JSON")
    ] = False,
) -> None:
    """Parse a linear-gradient string into colors, locations and start/end points."""
    result = parse_gradient(text)

    if output_json:
        typer.echo(json.dumps(result.to_react_native(), indent=2))
        return

    if not result.colors:
        console.print("[yellow]No color stops found.[/yellow]")

    table = Table(title=f"Gradient ({result.angle:g}deg)")
    table.add_column("Color")
    table.add_column("Location", justify="right")
    for color, location in zip(result.colors, result.locations, strict=True):
        table.add_row(color, f"{location:.4f}")

    console.print(table)
    console.print(f"start: ({result.start.x:.4f}, {result.start.y:.4f})")
    console.print(f"end:   ({result.end.x:.4f}, {result.end.y:.4f})")
