"""Convert command implementation."""

from __future__ import annotations

from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import Annotated

import typer  # Required at runtime by Typer
from rich.markup import escape

from peakxml.cli.commands.shared import load_optional_config, load_peak_list
from peakxml.io.files import write_peaklist
from peakxml.ui import LEVELS, close_logging, error, setup_logging, success


def convert_command(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the PeakList.xml file to read",
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output_file: Annotated[
        Path,
        typer.Argument(
            help="Path of the PeakList.xml file to write",
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="TOML configuration file with [output] and [logging] settings",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    compact: Annotated[
        bool,
        typer.Option(
            "--compact",
            help="Write without indentation (overrides the configuration)",
        ),
    ] = False,
) -> None:
    """Read a PeakList.xml file and write it back in normalized form.

    Attributes are rewritten in schema order, numbers in their shortest form
    and missing values are left out.

    Examples
    --------
      Normalize a file:
        $ peakxml convert peaklist.xml normalized.xml

      Use settings from a configuration file:
        $ peakxml convert peaklist.xml out.xml --config peakxml.toml
    """
    settings = load_optional_config(config)
    setup_logging(settings.logging.file, level=LEVELS[settings.logging.level])

    try:
        peak_list = load_peak_list(input_file)
        try:
            write_peaklist(
                peak_list,
                output_file,
                pretty_print=settings.output.pretty_print and not compact,
                encoding=settings.output.encoding,
                xml_declaration=settings.output.xml_declaration,
            )
        except (OSError, LookupError) as exc:
            error(f"Could not write [path]{escape(str(output_file))}[/path]: {escape(str(exc))}")
            raise typer.Exit(1) from exc

        success(
            f"Wrote {len(peak_list.peak_lists)} peak list(s), {peak_list.n_peaks} peak(s) "
            f"to [path]{escape(str(output_file))}[/path]"
        )
    finally:
        close_logging()
