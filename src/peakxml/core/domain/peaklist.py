"""Domain representation of a Bruker PeakList.xml document.

The hierarchy mirrors the file layout::

    PeakList
    └── PeakList1D (0..n)
        ├── PeakList1DHeader (0..1)
        │   └── PeakPickDetails (0..1)
        └── Peak1D (0..n)

Every scalar is optional because every XML attribute is optional; a missing
attribute is stored as ``None``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PeakPickDetails(BaseModel):
    """Peak-picking parameters used by the acquisition software.

    Attributes:
        f1: Upper chemical shift bound (ppm).
        f2: Lower chemical shift bound (ppm).
        mi: Minimum intensity (cm).
        maxi: Maximum intensity (cm).
        pc: Peak picking sensitivity.
    """

    model_config = ConfigDict(extra="forbid")

    f1: float
    f2: float
    mi: float
    maxi: float
    pc: float


class Peak1D(BaseModel):
    """A single peak of a 1D peak list."""

    model_config = ConfigDict(extra="forbid")

    f1: float | None = Field(default=None, description="Peak position (ppm)")
    intensity: float | None = Field(default=None, description="Peak intensity")
    type: int | None = Field(default=None, description="Peak classification code")


class PeakList1DHeader(BaseModel):
    """Metadata of a 1D peak list together with its peak-picking details."""

    model_config = ConfigDict(extra="forbid")

    creator: str | None = None
    date: datetime | None = None
    exp_no: int | None = Field(default=None, description="Experiment number (expNo)")
    name: str | None = Field(default=None, description="Dataset name")
    owner: str | None = None
    proc_no: int | None = Field(default=None, description="Processing number (procNo)")
    source: str | None = None
    details: PeakPickDetails | None = None


class PeakList1D(BaseModel):
    """A header and the peaks picked with it."""

    model_config = ConfigDict(extra="forbid")

    header: PeakList1DHeader | None = None
    peaks: list[Peak1D] = Field(default_factory=list)

    @property
    def positions(self) -> list[float | None]:
        """Peak positions (ppm) in document order."""
        return [peak.f1 for peak in self.peaks]


class PeakList(BaseModel):
    """The whole PeakList.xml document."""

    model_config = ConfigDict(extra="forbid")

    modified: datetime | None = None
    peak_lists: list[PeakList1D] = Field(default_factory=list)

    @property
    def n_peaks(self) -> int:
        """Total number of peaks across all peak lists."""
        return sum(len(peak_list.peaks) for peak_list in self.peak_lists)


__all__ = ["Peak1D", "PeakList", "PeakList1D", "PeakList1DHeader", "PeakPickDetails"]
