"""Logging configuration for peakxml UI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from peakxml.ui.console import VERSION, console

# Module-level logger (configured by setup_logging)
_logger: logging.Logger | None = None

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        import json
        from datetime import datetime

        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
) -> None:
    """Configure the ``peakxml`` logger.

    Messages go to ``log_file`` when given (JSON lines if its suffix is
    ``.json``) and to the console when ``verbose`` is set. With neither,
    logging stays disabled.
    """
    global _logger

    if log_file is None and not verbose:
        _logger = None
        return

    _logger = logging.getLogger("peakxml")
    _logger.setLevel(level)
    _logger.handlers.clear()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)

        if log_file.suffix == ".json":
            file_formatter: logging.Formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        file_handler.setFormatter(file_formatter)
        _logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        console_handler.setLevel(level)
        _logger.addHandler(console_handler)

    _logger.debug("peakxml v%s - session started", VERSION)
    _logger.debug("Command: %s", " ".join(sys.argv))
    _logger.debug("Python: %s | Platform: %s", sys.version.split()[0], sys.platform)


def log(message: str, level: str = "info") -> None:
    """Log a message (if logging is enabled)."""
    if _logger is None:
        return

    _logger.log(LEVELS.get(level.lower(), logging.INFO), message)


def close_logging() -> None:
    """Detach and close all handlers installed by setup_logging."""
    global _logger

    if _logger is None:
        return

    _logger.debug("peakxml session completed")

    for handler in _logger.handlers[:]:
        handler.close()
        _logger.removeHandler(handler)
    _logger = None


__all__ = [
    "LEVELS",
    "JSONFormatter",
    "close_logging",
    "log",
    "setup_logging",
]
