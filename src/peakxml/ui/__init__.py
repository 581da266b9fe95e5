"""UI and terminal output styling for peakxml.

Submodules:
- console: Theme and console instance
- logging: Logging setup (file and Rich console handlers)
- branding: Version display
- messages: Status messages (success, error, warning, etc.)
- tables: Table display utilities
"""

from peakxml.ui.branding import show_version
from peakxml.ui.console import PEAKXML_THEME, VERSION, console
from peakxml.ui.logging import LEVELS, close_logging, log, setup_logging
from peakxml.ui.messages import error, info, success, warning
from peakxml.ui.tables import create_table, format_cell, print_peak_list, print_summary

__all__ = [
    "LEVELS",
    "PEAKXML_THEME",
    "VERSION",
    "close_logging",
    "console",
    "create_table",
    "error",
    "format_cell",
    "info",
    "log",
    "print_peak_list",
    "print_summary",
    "setup_logging",
    "show_version",
    "success",
    "warning",
]
