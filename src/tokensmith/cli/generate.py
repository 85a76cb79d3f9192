"""
CLI command for stylesheet generation.

Reads tokensmith.toml (if present), applies command-line overrides, and
writes the CSS variables file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from tokensmith.cli.utils import configure_logging
from tokensmith.core.errors import TokensmithError
from tokensmith.core.generator import generate_css_variables
from tokensmith.core.manifest import CONFIG_FILE, load_config

logger = logging.getLogger(__name__)

console = Console()


def generate_command(
    tokens_dir: Annotated[
        Path | None, typer.Option("--tokens-dir", "-t", help="Directory of JSON token files")
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Stylesheet file to write")
    ] = None,
    prefix: Annotated[
        str | None, typer.Option("--prefix", "-p", help="First segment of every variable name")
    ] = None,
    unit: Annotated[
        str | None, typer.Option("--unit", help="Unit appended to number and dimension tokens")
    ] = None,
    config_path: Annotated[
        Path, typer.Option("--config", "-c", help="Path to tokensmith.toml")
    ] = Path(CONFIG_FILE),
    verbose: Annotated[bool, typer.Option("--verbose", help="Log progress details")] = False,
) -> None:
    """Generate CSS custom properties from design token files."""
    configure_logging(verbose)

    try:
        config = load_config(config_path).with_overrides(
            tokens_dir=tokens_dir, output=output, prefix=prefix, unit=unit
        )
        report = generate_css_variables(config)
    except TokensmithError as e:
        logger.exception("Stylesheet generation failed")
        console.print(f"[red]Error generating CSS variables: {e.message}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected failure during stylesheet generation")
        console.print(f"[red]Error generating CSS variables: {e}[/red]")
        raise typer.Exit(1)

    if not report.written:
        console.print(f"[yellow]No JSON files found in {config.tokens_dir}[/yellow]")
        return

    console.print(f"[green]CSS variables generated: {report.output_path}[/green]")
    console.print(f"  Total variables: {report.variable_count}")
    console.print(f"  Source files: {len(report.source_files)}")
    if report.failed_files:
        names = ", ".join(path.name for path in report.failed_files)
        console.print(f"  [red]Failed files: {names}[/red]")
