"""Info command implementation."""

from __future__ import annotations


def info_command() -> None:
    """Show system information.

    Display details about the peakxml installation and its XML backend.
    """
    import sys

    from lxml import etree

    from peakxml import __version__
    from peakxml.io.files import READERS
    from peakxml.ui import console

    console.print("[bold]peakxml System Information[/bold]\n")

    console.print(f"[green]peakxml version:[/green] {__version__}")
    console.print(f"[green]Python version:[/green] {sys.version}")
    console.print(f"[green]lxml version:[/green] {etree.__version__}")
    console.print(
        "[green]libxml2 version:[/green] " + ".".join(str(v) for v in etree.LIBXML_VERSION)
    )
    console.print(f"[green]Supported extensions:[/green] {', '.join(sorted(READERS))}")
