"""Console configuration and theme for peakxml UI.

This module provides the central console instance and theme used throughout
the application for consistent styling.
"""

from rich.console import Console
from rich.theme import Theme

from peakxml import __version__

PEAKXML_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        # --- UI Structure ---
        "header": "bold cyan",
        "panel.border": "blue",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "number": "green",
        "path": "blue underline",
        "code": "bold magenta",
        "dim": "dim",
    }
)

# Single console instance for entire application
console = Console(theme=PEAKXML_THEME)

VERSION = __version__

__all__ = ["PEAKXML_THEME", "VERSION", "console"]
