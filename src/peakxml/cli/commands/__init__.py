"""CLI command modules for peakxml.

Each module exports a command function decorated with the necessary Typer
annotations; the main app.py imports and registers these commands.
"""

from peakxml.cli.commands.convert import convert_command
from peakxml.cli.commands.info import info_command
from peakxml.cli.commands.init import init_command
from peakxml.cli.commands.show import show_command

__all__ = [
    "convert_command",
    "info_command",
    "init_command",
    "show_command",
]
