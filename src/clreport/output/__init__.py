"""Report formatting and rendering."""

from clreport.output.base import ReportFormatter
from clreport.output.cursor import IndentCursor
from clreport.output.writer import ReportWriter, format_json, format_xml
from clreport.output.xml_formatter import XmlReportFormatter

__all__ = [
    "IndentCursor",
    "ReportFormatter",
    "ReportWriter",
    "XmlReportFormatter",
    "format_json",
    "format_xml",
]
