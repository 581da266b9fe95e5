"""Shared foundational utilities for peakxml."""

from peakxml.core.shared import constants
from peakxml.core.shared.exceptions import (
    CoercionError,
    ConfigError,
    DataIOError,
    PeakXMLError,
)

__all__ = [
    "CoercionError",
    "ConfigError",
    "DataIOError",
    "PeakXMLError",
    "constants",
]
