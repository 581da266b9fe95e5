"""Command-line interface for peakxml."""

from peakxml.cli.app import app

__all__ = ["app"]
