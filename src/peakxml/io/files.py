"""Reading and writing PeakList.xml files."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from lxml import etree

from peakxml.core.domain.peaklist import PeakList
from peakxml.core.shared.exceptions import DataIOError
from peakxml.io.mapper import parse
from peakxml.io.serializer import serialize

logger = logging.getLogger(__name__)

Reader = Callable[[Path], PeakList | None]

READERS: dict[str, Reader] = {}


def register_reader(file_types: str | Iterable[str]) -> Callable[[Reader], Reader]:
    """Decorator to register a reader function for specific file types."""
    if isinstance(file_types, str):
        file_types = [file_types]

    def decorator(fn: Reader) -> Reader:
        for ft in file_types:
            READERS[ft] = fn
        return fn

    return decorator


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def parse_bytes(data: bytes) -> PeakList | None:
    """Parse an in-memory PeakList.xml document.

    Raises:
        lxml.etree.XMLSyntaxError: If the data is not well-formed XML.
    """
    return parse(etree.fromstring(data, parser=_xml_parser()))


@register_reader("xml")
def read_peaklist(path: Path) -> PeakList | None:
    """Read a PeakList.xml file.

    Args:
        path: Path to the XML file.

    Returns:
        PeakList, or None if the document has no ``PeakList`` element.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        lxml.etree.XMLSyntaxError: If the file is not well-formed XML.
        CoercionError: If an attribute value cannot be converted.
    """
    if not path.exists():
        msg = f"Peak list file not found: {path}"
        raise FileNotFoundError(msg)

    logger.debug("Reading %s", path)
    tree = etree.parse(str(path), parser=_xml_parser())
    return parse(tree)


def read_list(path: Path) -> PeakList | None:
    """Read a peak list from a file based on its extension."""
    extension = path.suffix.lstrip(".").lower()
    reader = READERS.get(extension)
    if reader is None:
        msg = f"No reader registered for extension: {extension}"
        raise DataIOError(msg)
    return reader(path)


def to_bytes(
    peak_list: PeakList,
    *,
    pretty_print: bool = True,
    encoding: str = "UTF-8",
    xml_declaration: bool = True,
) -> bytes:
    """Serialize a PeakList to an encoded XML document."""
    return etree.tostring(
        serialize(peak_list),
        pretty_print=pretty_print,
        encoding=encoding,
        xml_declaration=xml_declaration,
    )


def write_peaklist(
    peak_list: PeakList,
    path: Path,
    *,
    pretty_print: bool = True,
    encoding: str = "UTF-8",
    xml_declaration: bool = True,
) -> Path:
    """Write a PeakList to ``path``, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(
        to_bytes(
            peak_list,
            pretty_print=pretty_print,
            encoding=encoding,
            xml_declaration=xml_declaration,
        )
    )
    logger.debug("Wrote %d peak list(s) to %s", len(peak_list.peak_lists), path)
    return path


__all__ = [
    "READERS",
    "parse_bytes",
    "read_list",
    "read_peaklist",
    "register_reader",
    "to_bytes",
    "write_peaklist",
]
