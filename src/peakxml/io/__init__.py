"""I/O module for peakxml.

Handles file operations including:
- Mapping PeakList.xml element trees to domain objects and back
- Reading and writing PeakList.xml files
- Configuration file loading/saving (TOML)
"""

from peakxml.io.config import generate_default_config, load_config, save_config
from peakxml.io.files import (
    READERS,
    parse_bytes,
    read_list,
    read_peaklist,
    register_reader,
    to_bytes,
    write_peaklist,
)
from peakxml.io.mapper import parse
from peakxml.io.serializer import serialize

__all__ = [
    "READERS",
    "generate_default_config",
    "load_config",
    "parse",
    "parse_bytes",
    "read_list",
    "read_peaklist",
    "register_reader",
    "save_config",
    "serialize",
    "to_bytes",
    "write_peaklist",
]
