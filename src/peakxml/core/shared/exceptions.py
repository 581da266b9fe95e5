"""Exception taxonomy for peakxml.

Structural problems in a document (missing or unexpected elements) are not
errors: the mapper reports them as ``None``. The exceptions below cover the
cases that callers are expected to handle explicitly.
"""

from __future__ import annotations


class PeakXMLError(Exception):
    """Base class for all peakxml-specific exceptions."""


class ConfigError(PeakXMLError):
    """Configuration-related errors (invalid/missing options, schema issues)."""


class DataIOError(PeakXMLError):
    """Data loading/saving errors (unsupported file types, unreadable documents)."""


class CoercionError(PeakXMLError, ValueError):
    """An attribute is present but its value cannot be converted to the declared type."""

    def __init__(self, tag: str, attribute: str, value: str, expected: str) -> None:
        self.tag = tag
        self.attribute = attribute
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid {expected} value {value!r} for attribute '{attribute}' on <{tag}>"
        )


__all__ = [
    "CoercionError",
    "ConfigError",
    "DataIOError",
    "PeakXMLError",
]
