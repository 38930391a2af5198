"""XML reports of classloader inventories."""

from clreport.core.models import ClassloaderHandle, ClassloaderInventory, ClassloaderNode
from clreport.output.cursor import IndentCursor
from clreport.output.writer import ReportWriter, format_json, format_xml
from clreport.output.xml_formatter import XmlReportFormatter

__version__ = "0.1.0"
__all__ = [
    "ClassloaderHandle",
    "ClassloaderInventory",
    "ClassloaderNode",
    "IndentCursor",
    "ReportWriter",
    "XmlReportFormatter",
    "format_json",
    "format_xml",
]
