"""Show command implementation."""

from __future__ import annotations

from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import Annotated

import typer  # Required at runtime by Typer

from peakxml.cli.commands.shared import load_peak_list
from peakxml.ui import close_logging, print_peak_list, setup_logging, warning


def show_command(
    peaklist: Annotated[
        Path,
        typer.Argument(
            help="Path to PeakList.xml file",
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    peaks: Annotated[
        bool,
        typer.Option(
            "--peaks/--no-peaks",
            help="List individual peaks below each header",
        ),
    ] = True,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write a session log to this file (.json for structured logs)",
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Show debug output while parsing",
        ),
    ] = False,
) -> None:
    """Display the contents of a PeakList.xml file.

    Examples
    --------
      Show headers and peaks:
        $ peakxml show pdata/1/peaklist.xml

      Show headers only:
        $ peakxml show pdata/1/peaklist.xml --no-peaks
    """
    import logging

    setup_logging(log_file, verbose=verbose, level=logging.DEBUG)
    try:
        peak_list = load_peak_list(peaklist)
        print_peak_list(peak_list, show_peaks=peaks)
        if not peak_list.peak_lists:
            warning("Document contains no peak lists")
    finally:
        close_logging()
