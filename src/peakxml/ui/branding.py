"""Version display for peakxml UI."""

from __future__ import annotations

import sys

from peakxml.ui.console import VERSION, console


def show_version() -> None:
    """Show version information."""
    console.print(f"[bold]peakxml[/bold] version [green]{VERSION}[/green]")
    console.print(f"[dim]Python {sys.version.split()[0]}[/dim]")


__all__ = ["show_version"]
