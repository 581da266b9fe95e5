"""UI messages and status indicators."""

from __future__ import annotations

from .console import console
from .logging import log

__all__ = [
    "error",
    "info",
    "success",
    "warning",
]


def success(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a success message."""
    spaces = "  " * indent
    console.print(f"{spaces}[success]✓[/success] {message}")
    if do_log:
        log(message)


def warning(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a warning message."""
    spaces = "  " * indent
    console.print(f"{spaces}[warning]⚠[/warning]  {message}")
    if do_log:
        log(message, level="warning")


def error(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an error message."""
    spaces = "  " * indent
    console.print(f"{spaces}[error]✗[/error] {message}")
    if do_log:
        log(message, level="error")


def info(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an info message."""
    spaces = "  " * indent
    console.print(f"{spaces}[dim]▸[/dim] {message}")
    if do_log:
        log(message)
