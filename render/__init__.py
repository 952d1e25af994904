"""Word cloud rendering modules."""

from .html_page import HtmlCloudRenderer, OutputWriteError, render_document, write_document
from .styling import FrequencyRange, RankedEntry, StyleMapper

__all__ = [
    "FrequencyRange",
    "HtmlCloudRenderer",
    "OutputWriteError",
    "RankedEntry",
    "StyleMapper",
    "render_document",
    "write_document",
]
