"""Rebuild a PeakList.xml element tree from peakxml domain objects.

Attributes are written in schema order. Attributes whose value is None are
omitted, as are a missing header or missing pick details, so that parsing the
result gives back the same objects.
"""

from __future__ import annotations

import logging

from lxml import etree

from peakxml.core.domain.peaklist import (
    Peak1D,
    PeakList,
    PeakList1D,
    PeakList1DHeader,
    PeakPickDetails,
)
from peakxml.core.shared.constants import (
    HEADER_ATTRIBUTES,
    HEADER_TAG,
    PEAK_1D_ATTRIBUTES,
    PEAK_1D_TAG,
    PEAK_LIST_1D_TAG,
    PEAK_LIST_ATTRIBUTES,
    PEAK_LIST_TAG,
    PICK_DETAILS_TAG,
    PICK_DETAILS_TEMPLATE,
)
from peakxml.io.coercion import format_value

logger = logging.getLogger(__name__)


def _set_attributes(
    element: etree._Element, names: tuple[str, ...], values: dict[str, object]
) -> None:
    for name in names:
        value = values[name]
        if value is not None:
            element.set(name, format_value(value))


def serialize(peak_list: PeakList) -> etree._ElementTree:
    """Build a new document whose root element is ``PeakList``."""
    root = etree.Element(PEAK_LIST_TAG)
    _set_attributes(root, PEAK_LIST_ATTRIBUTES, {"modified": peak_list.modified})
    for child in peak_list.peak_lists:
        serialize_peak_list_1d(root, child)

    logger.debug("Serialized <%s> with %d peak list(s)", PEAK_LIST_TAG, len(peak_list.peak_lists))
    return etree.ElementTree(root)


def serialize_peak_list_1d(parent: etree._Element, peak_list: PeakList1D) -> etree._Element:
    """Append a ``PeakList1D`` element (header first, then peaks) to ``parent``."""
    element = etree.SubElement(parent, PEAK_LIST_1D_TAG)
    if peak_list.header is not None:
        serialize_header(element, peak_list.header)
    for peak in peak_list.peaks:
        serialize_peak(element, peak)
    return element


def serialize_header(parent: etree._Element, header: PeakList1DHeader) -> etree._Element:
    """Append a ``PeakList1DHeader`` element to ``parent``."""
    element = etree.SubElement(parent, HEADER_TAG)
    _set_attributes(
        element,
        HEADER_ATTRIBUTES,
        {
            "creator": header.creator,
            "date": header.date,
            "expNo": header.exp_no,
            "name": header.name,
            "owner": header.owner,
            "procNo": header.proc_no,
            "source": header.source,
        },
    )
    if header.details is not None:
        serialize_pick_details(element, header.details)
    return element


def format_pick_details(details: PeakPickDetails) -> str:
    """Render pick details as the element's text content."""
    return PICK_DETAILS_TEMPLATE.format(
        f1=format_value(details.f1),
        f2=format_value(details.f2),
        mi=format_value(details.mi),
        maxi=format_value(details.maxi),
        pc=format_value(details.pc),
    )


def serialize_pick_details(parent: etree._Element, details: PeakPickDetails) -> etree._Element:
    """Append a ``PeakPickDetails`` element to ``parent``."""
    element = etree.SubElement(parent, PICK_DETAILS_TAG)
    element.text = format_pick_details(details)
    return element


def serialize_peak(parent: etree._Element, peak: Peak1D) -> etree._Element:
    """Append a ``Peak1D`` element to ``parent``."""
    element = etree.SubElement(parent, PEAK_1D_TAG)
    _set_attributes(
        element,
        PEAK_1D_ATTRIBUTES,
        {"F1": peak.f1, "intensity": peak.intensity, "type": peak.type},
    )
    return element


__all__ = [
    "format_pick_details",
    "serialize",
    "serialize_header",
    "serialize_peak",
    "serialize_peak_list_1d",
    "serialize_pick_details",
]
