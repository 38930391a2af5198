"""Base report formatter interface."""

from abc import ABC, abstractmethod
from typing import Any

from clreport.core.constants import ENTRY_TYPE_URL
from clreport.core.models import ClassloaderHandle
from clreport.output.cursor import IndentCursor


class ReportFormatter(ABC):
    """
    Abstract base class for classloader report formatters.

    A report walker calls the begin/end/format methods in document order:
    opens pre-order, closes post-order. Each call returns exactly one line
    without a trailing newline. Container methods move the cursor; leaf
    methods only read it.
    """

    # Report

    @abstractmethod
    def begin_report(self, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def end_report(self, prefix: IndentCursor) -> str:
        pass

    # Classloader

    @abstractmethod
    def begin_classloader(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def end_classloader(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        pass

    # Counted sections

    @abstractmethod
    def begin_attributes(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def end_attributes(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def begin_children(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def end_children(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def begin_entries(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def end_entries(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def begin_errors(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def end_errors(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def begin_packages(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def end_packages(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def begin_roles(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def end_roles(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def begin_unassigned_roles(self, count: int, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def end_unassigned_roles(self, count: int, prefix: IndentCursor) -> str:
        pass

    # Leaves

    @abstractmethod
    def format_attribute(self, name: str, value: str, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def format_child(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def format_class(self, cls: str | type, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def format_entry(self, entry_type: str, value: str, prefix: IndentCursor) -> str:
        pass

    def format_url_entry(self, url: Any, prefix: IndentCursor) -> str:
        """Format a URL entry; same as a typed entry of type 'url'."""
        return self.format_entry(ENTRY_TYPE_URL, url_text(url), prefix)

    @abstractmethod
    def format_error(self, message: str, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def format_explicit_parent(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def format_implicit_parent(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def format_package(self, name: str, prefix: IndentCursor) -> str:
        pass

    @abstractmethod
    def format_role(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        pass

    def format_unassigned_role(self, handle: ClassloaderHandle, prefix: IndentCursor) -> str:
        """Format a role no classloader fills; rendered like an assigned role."""
        return self.format_role(handle, prefix)


def url_text(url: Any) -> str:
    """Canonical string form of a URL object or string."""
    geturl = getattr(url, "geturl", None)
    if callable(geturl):
        return geturl()
    return str(url)


def class_name(cls: str | type) -> str:
    """Fully qualified name of a class, or the given dotted name unchanged."""
    if isinstance(cls, type):
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls
