"""Streams a classloader inventory through a report formatter."""

from typing import Callable, Iterator, Sequence, TypeVar
from uuid import uuid4

from clreport.core.config import Settings, get_settings
from clreport.core.constants import LINE_SEPARATOR, XML_DECLARATION
from clreport.core.exceptions import UnbalancedNestingError
from clreport.core.logging import get_logger, log_context, log_timing
from clreport.core.models import ClassloaderInventory, ClassloaderNode
from clreport.output.base import ReportFormatter
from clreport.output.cursor import IndentCursor
from clreport.output.xml_formatter import XmlReportFormatter

logger = get_logger(__name__)

T = TypeVar("T")


class ReportWriter:
    """
    Walks an inventory depth-first and emits one formatter line per element.

    Opens are emitted pre-order and closes post-order. Section counts are
    taken from the inventory lists, so they always match the emitted elements.
    """

    def __init__(
        self,
        formatter: ReportFormatter | None = None,
        settings: Settings | None = None,
    ):
        self._formatter = formatter or XmlReportFormatter()
        self._settings = settings or get_settings()

    @property
    def formatter(self) -> ReportFormatter:
        return self._formatter

    def iter_lines(self, inventory: ClassloaderInventory) -> Iterator[str]:
        """
        Yield the report lines in document order.

        Raises:
            UnbalancedNestingError: If the cursor is not back at depth 0 after the root closes
        """
        fmt = self._formatter
        prefix = IndentCursor()

        if self._settings.xml_declaration:
            yield XML_DECLARATION

        yield fmt.begin_report(prefix)
        for node in inventory.classloaders:
            yield from self._classloader_lines(node, prefix)
        yield from self._section(
            inventory.unassigned_roles,
            fmt.begin_unassigned_roles,
            fmt.end_unassigned_roles,
            lambda role: fmt.format_unassigned_role(role, prefix),
            prefix,
        )
        yield fmt.end_report(prefix)

        if prefix.depth != 0:
            raise UnbalancedNestingError(depth=prefix.depth)

    def render(self, inventory: ClassloaderInventory) -> str:
        """Render the whole report as one string."""
        report_id = str(uuid4())[:8]
        with log_context(report_id=report_id):
            with log_timing(logger, "render_report"):
                return LINE_SEPARATOR.join(self.iter_lines(inventory))

    def _classloader_lines(self, node: ClassloaderNode, prefix: IndentCursor) -> Iterator[str]:
        fmt = self._formatter
        logger.debug("Rendering classloader", extra={"classloader": str(node.handle)})

        yield fmt.begin_classloader(node.handle, prefix)

        if node.class_name:
            yield fmt.format_class(node.class_name, prefix)

        if node.parent is not None:
            if node.parent.is_explicit:
                yield fmt.format_explicit_parent(node.parent.handle, prefix)
            else:
                yield fmt.format_implicit_parent(node.parent.handle, prefix)

        yield from self._section(
            node.roles,
            fmt.begin_roles,
            fmt.end_roles,
            lambda role: fmt.format_role(role, prefix),
            prefix,
        )
        yield from self._section(
            node.attributes,
            fmt.begin_attributes,
            fmt.end_attributes,
            lambda attr: fmt.format_attribute(attr.name, attr.value, prefix),
            prefix,
        )
        yield from self._section(
            node.children,
            fmt.begin_children,
            fmt.end_children,
            lambda child: fmt.format_child(child, prefix),
            prefix,
        )
        yield from self._entries(node, prefix)
        yield from self._section(
            node.packages,
            fmt.begin_packages,
            fmt.end_packages,
            lambda pkg: fmt.format_package(pkg, prefix),
            prefix,
        )
        yield from self._section(
            node.errors,
            fmt.begin_errors,
            fmt.end_errors,
            lambda msg: fmt.format_error(msg, prefix),
            prefix,
        )

        yield fmt.end_classloader(node.handle, prefix)

    def _entries(self, node: ClassloaderNode, prefix: IndentCursor) -> Iterator[str]:
        fmt = self._formatter
        count = node.entry_count
        if count == 0 and not self._settings.include_empty_sections:
            return
        yield fmt.begin_entries(count, prefix)
        for url in node.urls:
            yield fmt.format_url_entry(url, prefix)
        for entry in node.entries:
            yield fmt.format_entry(entry.type, entry.value, prefix)
        yield fmt.end_entries(count, prefix)

    def _section(
        self,
        items: Sequence[T],
        begin: Callable[[int, IndentCursor], str],
        end: Callable[[int, IndentCursor], str],
        format_item: Callable[[T], str],
        prefix: IndentCursor,
    ) -> Iterator[str]:
        count = len(items)
        if count == 0 and not self._settings.include_empty_sections:
            return
        yield begin(count, prefix)
        for item in items:
            yield format_item(item)
        yield end(count, prefix)


def format_xml(
    inventory: ClassloaderInventory,
    settings: Settings | None = None,
) -> str:
    """
    Format an inventory as an XML classloader report.

    Args:
        inventory: Inventory to format
        settings: Optional settings for customization

    Returns:
        XML string
    """
    return ReportWriter(XmlReportFormatter(), settings).render(inventory)


def format_json(inventory: ClassloaderInventory, indent: int | None = None) -> str:
    """
    Format an inventory as JSON.

    Args:
        inventory: Inventory to format
        indent: JSON indentation level (defaults to the configured indent)

    Returns:
        JSON string
    """
    if indent is None:
        indent = get_settings().json_indent
    return inventory.model_dump_json(indent=indent or None)
