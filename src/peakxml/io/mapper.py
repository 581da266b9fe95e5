"""Map a PeakList.xml element tree onto peakxml domain objects.

Every ``parse_*`` function follows the same contract: it returns ``None`` for
a missing node or a node with an unexpected tag, reads the node's attributes
through :mod:`peakxml.io.coercion`, resolves its children in document order
and only then builds the entity. Input nodes are never modified.
"""

from __future__ import annotations

import logging
import re

from lxml import etree

from peakxml.core.domain.peaklist import (
    Peak1D,
    PeakList,
    PeakList1D,
    PeakList1DHeader,
    PeakPickDetails,
)
from peakxml.core.shared.constants import (
    HEADER_TAG,
    PEAK_1D_TAG,
    PEAK_LIST_1D_TAG,
    PEAK_LIST_TAG,
    PICK_DETAILS_PATTERN,
    PICK_DETAILS_TAG,
)
from peakxml.io.coercion import get_datetime, get_float, get_int, get_str, parse_float

logger = logging.getLogger(__name__)

PICK_DETAILS_RE = re.compile(PICK_DETAILS_PATTERN)


def _matches(node: etree._Element | None, tag: str) -> bool:
    return node is not None and node.tag == tag


def _first(node: etree._Element, tag: str) -> etree._Element | None:
    return next(node.iterchildren(tag), None)


def parse(root: etree._Element | etree._ElementTree | None) -> PeakList | None:
    """Parse the first ``PeakList`` element found in a document.

    Args:
        root: Document tree or element. The element itself and all of its
            descendants are searched for a ``PeakList`` element.

    Returns:
        The parsed document, or None if there is no ``PeakList`` element.
    """
    if root is None:
        return None
    if isinstance(root, etree._ElementTree):
        root = root.getroot()
    node = next(root.iter(PEAK_LIST_TAG), None)
    if node is None:
        logger.debug("No <%s> element found under <%s>", PEAK_LIST_TAG, root.tag)
        return None
    return parse_peak_list(node)


def parse_peak_list(node: etree._Element | None) -> PeakList | None:
    """Parse a ``PeakList`` element and all of its peak lists."""
    if not _matches(node, PEAK_LIST_TAG):
        return None

    modified = get_datetime(node, "modified")
    peak_lists = [parse_peak_list_1d(child) for child in node.iterchildren(PEAK_LIST_1D_TAG)]

    logger.debug("Parsed <%s> with %d peak list(s)", PEAK_LIST_TAG, len(peak_lists))
    return PeakList(modified=modified, peak_lists=peak_lists)


def parse_peak_list_1d(node: etree._Element | None) -> PeakList1D | None:
    """Parse a ``PeakList1D`` element: its header and its peaks."""
    if not _matches(node, PEAK_LIST_1D_TAG):
        return None

    header = parse_header(_first(node, HEADER_TAG))
    peaks = [parse_peak(child) for child in node.iterchildren(PEAK_1D_TAG)]

    return PeakList1D(header=header, peaks=peaks)


def parse_header(node: etree._Element | None) -> PeakList1DHeader | None:
    """Parse a ``PeakList1DHeader`` element and its pick details."""
    if not _matches(node, HEADER_TAG):
        return None

    return PeakList1DHeader(
        creator=get_str(node, "creator"),
        date=get_datetime(node, "date"),
        exp_no=get_int(node, "expNo"),
        name=get_str(node, "name"),
        owner=get_str(node, "owner"),
        proc_no=get_int(node, "procNo"),
        source=get_str(node, "source"),
        details=parse_pick_details(_first(node, PICK_DETAILS_TAG)),
    )


def parse_pick_details_text(text: str | None) -> PeakPickDetails | None:
    """Parse the ``F1=...ppm, F2=...ppm, MI=...cm, MAXI=...cm, PC=...`` template.

    The text is matched as a whole; if it deviates from the template in any
    way, including a value that is not a number, None is returned.
    """
    if text is None:
        return None
    match = PICK_DETAILS_RE.match(text.strip())
    if match is None:
        logger.debug("Unrecognized peak picking details: %r", text)
        return None
    try:
        values = {key: parse_float(value) for key, value in match.groupdict().items()}
    except ValueError:
        logger.debug("Non-numeric value in peak picking details: %r", text)
        return None
    return PeakPickDetails(**values)


def parse_pick_details(node: etree._Element | None) -> PeakPickDetails | None:
    """Parse a ``PeakPickDetails`` element from its text content."""
    if not _matches(node, PICK_DETAILS_TAG):
        return None
    return parse_pick_details_text("".join(node.itertext()))


def parse_peak(node: etree._Element | None) -> Peak1D | None:
    """Parse a ``Peak1D`` element."""
    if not _matches(node, PEAK_1D_TAG):
        return None

    return Peak1D(
        f1=get_float(node, "F1"),
        intensity=get_float(node, "intensity"),
        type=get_int(node, "type"),
    )


__all__ = [
    "parse",
    "parse_header",
    "parse_peak",
    "parse_peak_list",
    "parse_peak_list_1d",
    "parse_pick_details",
    "parse_pick_details_text",
]
