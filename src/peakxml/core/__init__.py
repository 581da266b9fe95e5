"""Core module for peakxml - domain models, schema constants and exceptions."""

from peakxml.core.domain import (
    LoggingConfig,
    OutputConfig,
    Peak1D,
    PeakList,
    PeakList1D,
    PeakList1DHeader,
    PeakPickDetails,
    PeakXMLConfig,
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
