"""Configuration constants for document rendering."""

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4

DEFAULT_FORMAT = "xml"
DEFAULT_APPROACH = "template"

# Sample content used when no document is supplied.
SAMPLE_TITLE = "Document Title"
SAMPLE_BODY = ("This is line 1", "This is line 2")

# File output
DEFAULT_PAGESIZE = A4
DEFAULT_PDF_FILENAME_TEMPLATE = "document_{format}.pdf"


class Theme:
    """Color and font choices for PDF output."""

    TEXT_PRIMARY = colors.HexColor("#2C3E50")

    FONT_REGULAR = "Courier"
    FONT_SIZE = 11
    LINE_HEIGHT = 14
    MARGIN = 50
