"""XML rendering of classloader reports."""

from typing import Any

from clreport.core.constants import (
    PARENT_DEFINITION_DEFAULT,
    PARENT_DEFINITION_EXPLICIT,
    TAG_ATTRIBUTE,
    TAG_ATTRIBUTES,
    TAG_CHILD,
    TAG_CHILDREN,
    TAG_CLASS,
    TAG_CLASSLOADER,
    TAG_ENTRIES,
    TAG_ENTRY,
    TAG_ERROR,
    TAG_ERRORS,
    TAG_PACKAGE,
    TAG_PACKAGES,
    TAG_PARENT,
    TAG_REPORT,
    TAG_ROLE,
    TAG_ROLES,
    TAG_UNASSIGNED_ROLES,
)
from clreport.core.exceptions import InvalidCountError
from clreport.core.models import ClassloaderHandle
from clreport.output.base import ReportFormatter, class_name
from clreport.output.cursor import IndentCursor

Attrs = list[tuple[str, Any]]


class XmlReportFormatter(ReportFormatter):
    """
    Writes a classloader report as indented XML.

    Values are inserted verbatim. Text containing quotes, angle brackets or
    ampersands must be sanitized by the caller.
    """

    # =========================================================================
    # Report and classloader
    # =========================================================================

    def begin_report(self, prefix: IndentCursor) -> str:
        return self._open(TAG_REPORT, prefix)

    def end_report(self, prefix: IndentCursor) -> str:
        return self._close(TAG_REPORT, prefix)

    def begin_classloader(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        return self._open(TAG_CLASSLOADER, prefix, _handle_attrs(handle))

    def end_classloader(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        return self._close(TAG_CLASSLOADER, prefix)

    # =========================================================================
    # Counted sections
    # =========================================================================

    def begin_attributes(self, count: int, prefix: IndentCursor) -> str:
        return self._open_counted(TAG_ATTRIBUTES, count, prefix)

    def end_attributes(self, count: int, prefix: IndentCursor) -> str:
        return self._close(TAG_ATTRIBUTES, prefix)

    def begin_children(self, count: int, prefix: IndentCursor) -> str:
        return self._open_counted(TAG_CHILDREN, count, prefix)

    def end_children(self, count: int, prefix: IndentCursor) -> str:
        return self._close(TAG_CHILDREN, prefix)

    def begin_entries(self, count: int, prefix: IndentCursor) -> str:
        return self._open_counted(TAG_ENTRIES, count, prefix)

    def end_entries(self, count: int, prefix: IndentCursor) -> str:
        return self._close(TAG_ENTRIES, prefix)

    def begin_errors(self, count: int, prefix: IndentCursor) -> str:
        return self._open_counted(TAG_ERRORS, count, prefix)

    def end_errors(self, count: int, prefix: IndentCursor) -> str:
        return self._close(TAG_ERRORS, prefix)

    def begin_packages(self, count: int, prefix: IndentCursor) -> str:
        return self._open_counted(TAG_PACKAGES, count, prefix)

    def end_packages(self, count: int, prefix: IndentCursor) -> str:
        return self._close(TAG_PACKAGES, prefix)

    def begin_roles(self, count: int, prefix: IndentCursor) -> str:
        return self._open_counted(TAG_ROLES, count, prefix)

    def end_roles(self, count: int, prefix: IndentCursor) -> str:
        return self._close(TAG_ROLES, prefix)

    def begin_unassigned_roles(self, count: int, prefix: IndentCursor) -> str:
        return self._open_counted(TAG_UNASSIGNED_ROLES, count, prefix)

    def end_unassigned_roles(self, count: int, prefix: IndentCursor) -> str:
        return self._close(TAG_UNASSIGNED_ROLES, prefix)

    # =========================================================================
    # Leaves
    # =========================================================================

    def format_attribute(self, name: str, value: str, prefix: IndentCursor) -> str:
        return self._leaf(TAG_ATTRIBUTE, prefix, [("name", name), ("value", value)])

    def format_child(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        return self._leaf(TAG_CHILD, prefix, _handle_attrs(handle))

    def format_class(self, cls: str | type, prefix: IndentCursor) -> str:
        return self._leaf(TAG_CLASS, prefix, [("name", class_name(cls))])

    def format_entry(self, entry_type: str, value: str, prefix: IndentCursor) -> str:
        # The entry type is the attribute name
        return self._leaf(TAG_ENTRY, prefix, [(entry_type, value)])

    def format_error(self, message: str, prefix: IndentCursor) -> str:
        return self._leaf(TAG_ERROR, prefix, [("msg", message)])

    def format_explicit_parent(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        attrs: Attrs = [("definition", PARENT_DEFINITION_EXPLICIT)]
        return self._leaf(TAG_PARENT, prefix, attrs + _handle_attrs(handle))

    def format_implicit_parent(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        attrs: Attrs = [("definition", PARENT_DEFINITION_DEFAULT)]
        return self._leaf(TAG_PARENT, prefix, attrs + _handle_attrs(handle))

    def format_package(self, name: str, prefix: IndentCursor) -> str:
        return self._leaf(TAG_PACKAGE, prefix, [("name", name)])

    def format_role(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        return self._leaf(TAG_ROLE, prefix, _handle_attrs(handle))

    # =========================================================================
    # Helpers
    # =========================================================================

    def _open(self, tag: str, prefix: IndentCursor, attrs: Attrs | None = None) -> str:
        line = f"{prefix.value}<{tag}{_render_attrs(attrs)}>"
        prefix.push(tag)
        return line

    def _open_counted(self, tag: str, count: int, prefix: IndentCursor) -> str:
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidCountError(tag, count)
        return self._open(tag, prefix, [("count", count)])

    def _close(self, tag: str, prefix: IndentCursor) -> str:
        prefix.pop(tag)
        return f"{prefix.value}</{tag}>"

    def _leaf(self, tag: str, prefix: IndentCursor, attrs: Attrs) -> str:
        return f"{prefix.value}<{tag}{_render_attrs(attrs)}/>"


def _handle_attrs(handle: ClassloaderHandle) -> Attrs:
    """Type and, when present, name of a handle."""
    attrs: Attrs = [("type", handle.type)]
    if handle.name is not None:
        attrs.append(("name", handle.name))
    return attrs


def _render_attrs(attrs: Attrs | None) -> str:
    if not attrs:
        return ""
    return "".join(f' {key}="{value}"' for key, value in attrs)
