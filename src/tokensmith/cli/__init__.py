"""
tokensmith CLI package.

- generate.py: stylesheet generation from token files
- gradient.py: linear-gradient parsing
- utils.py: shared helpers
"""

from __future__ import annotations

import sys

import typer

from tokensmith.cli.generate import generate_command
from tokensmith.cli.gradient import gradient_command
from tokensmith.cli.utils import version_callback

app = typer.Typer(
    help="tokensmith - design tokens to CSS custom properties",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """tokensmith CLI main callback for global options."""
    pass


app.command(name="generate")(generate_command)
app.command(name="gradient")(gradient_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
