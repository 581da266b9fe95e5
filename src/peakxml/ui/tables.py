"""UI tables for displaying structured data.

This module provides functions for creating and displaying Rich tables
with consistent styling across the application.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich import box
from rich.markup import escape
from rich.table import Table

from peakxml.io.coercion import format_value

from .console import console

if TYPE_CHECKING:
    from peakxml.core.domain.peaklist import PeakList, PeakList1D

__all__ = [
    "create_table",
    "format_cell",
    "print_peak_list",
    "print_summary",
]

MISSING = "[dim]n/a[/dim]"


def format_cell(value: object) -> str:
    """Render a possibly missing value for display in a table cell."""
    if value is None:
        return MISSING
    return escape(format_value(value))


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling.

    Args:
        title: Optional table title
        show_header: Whether to show table header

    Returns
    -------
        Configured Table instance
    """
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table.

    Args:
        items: Dictionary of key-value pairs to display
        title: Table title
    """
    table = create_table(title, show_header=False)
    table.add_column("Item", style="metric")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, format_cell(value))

    console.print(table)


def _header_items(peak_list: PeakList1D) -> dict[str, object]:
    header = peak_list.header
    if header is None:
        return {"Header": None}

    items: dict[str, object] = {
        "Name": header.name,
        "Experiment": header.exp_no,
        "Processing": header.proc_no,
        "Creator": header.creator,
        "Owner": header.owner,
        "Date": header.date,
        "Source": header.source,
    }
    details = header.details
    if details is None:
        items["Pick details"] = None
    else:
        items["Pick range (ppm)"] = f"{details.f1} to {details.f2}"
        items["Intensity (cm)"] = f"{details.mi} to {details.maxi}"
        items["Sensitivity (PC)"] = details.pc
    items["Peaks"] = len(peak_list.peaks)
    return items


def _print_peaks(peak_list: PeakList1D, title: str) -> None:
    table = create_table(title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("F1 (ppm)", style="number", justify="right")
    table.add_column("Intensity", style="number", justify="right")
    table.add_column("Type", justify="right")

    for index, peak in enumerate(peak_list.peaks, start=1):
        table.add_row(
            str(index),
            format_cell(peak.f1),
            format_cell(peak.intensity),
            format_cell(peak.type),
        )

    console.print(table)


def print_peak_list(peak_list: PeakList, show_peaks: bool = True) -> None:
    """Print every peak list of a document: header summary, then its peaks."""
    print_summary(
        {
            "Modified": peak_list.modified,
            "Peak lists": len(peak_list.peak_lists),
            "Total peaks": peak_list.n_peaks,
        },
        title="PeakList",
    )

    for index, child in enumerate(peak_list.peak_lists, start=1):
        print_summary(_header_items(child), title=f"Peak list {index}")
        if show_peaks and child.peaks:
            _print_peaks(child, title=f"Peaks ({index})")
