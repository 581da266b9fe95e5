"""Domain models representing core peakxml entities."""

from peakxml.core.domain.config import LoggingConfig, OutputConfig, PeakXMLConfig
from peakxml.core.domain.peaklist import (
    Peak1D,
    PeakList,
    PeakList1D,
    PeakList1DHeader,
    PeakPickDetails,
)

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "Peak1D",
    "PeakList",
    "PeakList1D",
    "PeakList1DHeader",
    "PeakPickDetails",
    "PeakXMLConfig",
]
