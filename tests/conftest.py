"""Pytest fixtures for peakxml tests."""

from datetime import datetime

import pytest
from lxml import etree

from peakxml.core.domain.peaklist import (
    Peak1D,
    PeakList,
    PeakList1D,
    PeakList1DHeader,
    PeakPickDetails,
)

PEAKLIST_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<PeakList modified="2020-01-01T00:00:00">
  <PeakList1D>
    <PeakList1DHeader creator="Bob" date="2019-12-31T23:59:59" expNo="5" name="sucrose"
                      owner="nmrsu" procNo="1" source="/opt/data/sucrose/5/pdata/1">
      <PeakPickDetails>F1=1.0ppm, F2=2.0ppm, MI=3.0cm, MAXI=4.0cm, PC=5.0</PeakPickDetails>
    </PeakList1DHeader>
    <Peak1D F1="1.5" intensity="100.0" type="1"/>
    <Peak1D F1="2.5" intensity="50.0" type="2"/>
  </PeakList1D>
</PeakList>
"""


@pytest.fixture
def peaklist_xml():
    """Raw bytes of a small PeakList.xml document."""
    return PEAKLIST_XML


@pytest.fixture
def peaklist_root(peaklist_xml):
    """Parsed lxml root element of the sample document."""
    return etree.fromstring(peaklist_xml)


@pytest.fixture
def peaklist_file(tmp_path, peaklist_xml):
    """Sample PeakList.xml written to disk."""
    path = tmp_path / "peaklist.xml"
    path.write_bytes(peaklist_xml)
    return path


@pytest.fixture
def sample_peak_list():
    """Fully populated PeakList with two 1D peak lists."""
    return PeakList(
        modified=datetime(2021, 3, 4, 5, 6, 7),
        peak_lists=[
            PeakList1D(
                header=PeakList1DHeader(
                    creator="alice",
                    date=datetime(2021, 3, 4, 5, 0, 0),
                    exp_no=10,
                    name="glucose",
                    owner="nmr",
                    proc_no=1,
                    source="/data/glucose/10/pdata/1",
                    details=PeakPickDetails(f1=12.5, f2=-0.5, mi=0.1, maxi=100.0, pc=1.2),
                ),
                peaks=[
                    Peak1D(f1=5.223, intensity=12345.678, type=0),
                    Peak1D(f1=4.64, intensity=9876.5, type=0),
                    Peak1D(f1=3.25, intensity=1.0e-3, type=1),
                ],
            ),
            PeakList1D(
                header=PeakList1DHeader(name="blank"),
                peaks=[Peak1D(f1=1.0)],
            ),
        ],
    )


@pytest.fixture
def sample_config_file(tmp_path):
    """Create a sample TOML configuration file."""
    config_path = tmp_path / "peakxml.toml"
    content = """
[output]
pretty_print = false
encoding = "ISO-8859-1"
xml_declaration = true

[logging]
level = "debug"
file = "session.log"
"""
    config_path.write_text(content)
    return config_path
