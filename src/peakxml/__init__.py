"""peakxml - Reader and writer for Bruker PeakList.xml files.

Public API:
    - parse / serialize: Map between lxml element trees and domain objects
    - read_peaklist / write_peaklist: File-level helpers

Domain Objects:
    - PeakList, PeakList1D, PeakList1DHeader, PeakPickDetails, Peak1D
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from peakxml.core.domain.config import PeakXMLConfig
from peakxml.core.domain.peaklist import (
    Peak1D,
    PeakList,
    PeakList1D,
    PeakList1DHeader,
    PeakPickDetails,
)
from peakxml.core.shared.exceptions import CoercionError, ConfigError, DataIOError, PeakXMLError
from peakxml.io.files import parse_bytes, read_peaklist, to_bytes, write_peaklist
from peakxml.io.mapper import parse
from peakxml.io.serializer import serialize

__all__ = [
    # Version
    "__version__",
    # Mapping
    "parse",
    "serialize",
    "parse_bytes",
    "to_bytes",
    "read_peaklist",
    "write_peaklist",
    # Configuration
    "PeakXMLConfig",
    # Domain
    "PeakList",
    "PeakList1D",
    "PeakList1DHeader",
    "PeakPickDetails",
    "Peak1D",
    # Errors
    "PeakXMLError",
    "CoercionError",
    "ConfigError",
    "DataIOError",
]
