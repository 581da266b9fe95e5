"""Optional attribute extraction with type coercion.

Each ``get_*`` function returns ``None`` when the attribute is missing and
raises :class:`~peakxml.core.shared.exceptions.CoercionError` when it is
present but cannot be converted. An absent attribute never reaches the
conversion step.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, TypeVar

from peakxml.core.shared.constants import DATETIME_FORMAT
from peakxml.core.shared.exceptions import CoercionError

if TYPE_CHECKING:
    from lxml import etree

T = TypeVar("T")

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _get(
    element: etree._Element, attribute: str, convert: Callable[[str], T], expected: str
) -> T | None:
    value = element.get(attribute)
    if value is None:
        return None
    try:
        return convert(value)
    except ValueError as e:
        raise CoercionError(str(element.tag), attribute, value, expected) from e


def parse_int(value: str) -> int:
    """Parse plain ASCII decimal integer text."""
    value = value.strip()
    if INT_RE.fullmatch(value) is None:
        msg = f"not a decimal integer: {value!r}"
        raise ValueError(msg)
    return int(value)


def parse_float(value: str) -> float:
    """Parse plain ASCII decimal text, with an optional exponent."""
    value = value.strip()
    if FLOAT_RE.fullmatch(value) is None:
        msg = f"not a decimal number: {value!r}"
        raise ValueError(msg)
    return float(value)


def parse_datetime(value: str) -> datetime:
    """Parse a ``YYYY-MM-DDTHH:MM:SS`` timestamp."""
    return datetime.strptime(value.strip(), DATETIME_FORMAT)


def get_str(element: etree._Element, attribute: str) -> str | None:
    """Return the attribute value unchanged, or None if missing."""
    return element.get(attribute)


def get_int(element: etree._Element, attribute: str) -> int | None:
    """Return the attribute value as an integer, or None if missing."""
    return _get(element, attribute, parse_int, "integer")


def get_float(element: etree._Element, attribute: str) -> float | None:
    """Return the attribute value as a float, or None if missing."""
    return _get(element, attribute, parse_float, "float")


def get_datetime(element: etree._Element, attribute: str) -> datetime | None:
    """Return the attribute value as a naive datetime, or None if missing."""
    return _get(element, attribute, parse_datetime, "timestamp")


def format_datetime(value: datetime) -> str:
    """Render a timestamp in the document's fixed pattern."""
    return value.strftime(DATETIME_FORMAT)


def format_value(value: object) -> str:
    """Render a scalar the way it is written into attributes and text."""
    if isinstance(value, datetime):
        return format_datetime(value)
    return str(value)


__all__ = [
    "format_datetime",
    "format_value",
    "get_datetime",
    "get_float",
    "get_int",
    "get_str",
    "parse_datetime",
    "parse_float",
    "parse_int",
]
