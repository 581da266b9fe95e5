"""Main Typer application for peakxml.

This module provides a thin orchestration layer that:
1. Creates the main Typer application
2. Imports commands from the commands/ subpackage
3. Registers commands
"""

from typing import Annotated

import typer

from peakxml.cli.callbacks import version_callback
from peakxml.cli.commands import convert_command, info_command, init_command, show_command

# Create main application
app = typer.Typer(
    name="peakxml",
    help="peakxml - Read and write Bruker PeakList.xml files",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """peakxml - Inspect and rewrite Bruker PeakList.xml peak lists."""


# Register commands
app.command(name="show")(show_command)
app.command(name="convert")(convert_command)
app.command(name="init")(init_command)
app.command(name="info")(info_command)


if __name__ == "__main__":
    app()
