"""Element names, attribute names and text formats of the PeakList.xml schema."""

DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Element tags
PEAK_LIST_TAG = "PeakList"
PEAK_LIST_1D_TAG = "PeakList1D"
HEADER_TAG = "PeakList1DHeader"
PICK_DETAILS_TAG = "PeakPickDetails"
PEAK_1D_TAG = "Peak1D"

# Attributes, in schema order
PEAK_LIST_ATTRIBUTES = ("modified",)
HEADER_ATTRIBUTES = ("creator", "date", "expNo", "name", "owner", "procNo", "source")
PEAK_1D_ATTRIBUTES = ("F1", "intensity", "type")

# PeakPickDetails text content
PICK_DETAILS_PATTERN = (
    r"^\s*F1=\s*(?P<f1>.+?)\s*ppm\s*,"
    r"\s*F2=\s*(?P<f2>.+?)\s*ppm\s*,"
    r"\s*MI=\s*(?P<mi>.+?)\s*cm\s*,"
    r"\s*MAXI=\s*(?P<maxi>.+?)\s*cm\s*,"
    r"\s*PC=\s*(?P<pc>.+?)\s*$"
)
PICK_DETAILS_TEMPLATE = "F1={f1}ppm, F2={f2}ppm, MI={mi}cm, MAXI={maxi}cm, PC={pc}"

__all__ = [
    "DATETIME_FORMAT",
    "HEADER_ATTRIBUTES",
    "HEADER_TAG",
    "PEAK_1D_ATTRIBUTES",
    "PEAK_1D_TAG",
    "PEAK_LIST_1D_TAG",
    "PEAK_LIST_ATTRIBUTES",
    "PEAK_LIST_TAG",
    "PICK_DETAILS_PATTERN",
    "PICK_DETAILS_TEMPLATE",
    "PICK_DETAILS_TAG",
]
