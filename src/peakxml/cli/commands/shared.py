"""Shared utilities for CLI commands."""

from pathlib import Path

import typer
from lxml import etree
from rich.markup import escape

from peakxml.core.domain.config import PeakXMLConfig
from peakxml.core.domain.peaklist import PeakList
from peakxml.core.shared.exceptions import PeakXMLError
from peakxml.io.config import load_config
from peakxml.io.files import read_list
from peakxml.ui import error, info


def load_peak_list(path: Path) -> PeakList:
    """Read a peak list file, reporting failures and exiting with code 1."""
    try:
        peak_list = read_list(path)
    except (PeakXMLError, OSError, etree.XMLSyntaxError) as exc:
        error(f"Could not read [path]{escape(str(path))}[/path]: {escape(str(exc))}")
        raise typer.Exit(1) from exc

    if peak_list is None:
        error(f"No <PeakList> element found in [path]{escape(str(path))}[/path]")
        raise typer.Exit(1)

    return peak_list


def load_optional_config(path: Path | None) -> PeakXMLConfig:
    """Load the configuration file if one is given, defaults otherwise."""
    if path is None:
        return PeakXMLConfig()

    try:
        config = load_config(path)
    except (PeakXMLError, OSError, ValueError) as exc:
        error(f"Invalid configuration: {escape(str(exc))}")
        info("Generate a template with [code]peakxml init[/code]")
        raise typer.Exit(1) from exc

    return config
