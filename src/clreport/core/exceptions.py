"""Custom exception hierarchy for clreport.

Formatter errors signal a broken call sequence from the report walker;
validation errors signal bad inventory data or settings.
"""

from typing import Any


class ClreportError(Exception):
    """Base exception for all clreport errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Formatter Errors
# =============================================================================


class FormatterError(ClreportError):
    """Base exception for report formatting errors."""

    pass


class UnbalancedNestingError(FormatterError):
    """Raised when an end call has no matching begin call."""

    def __init__(self, depth: int, tag: str | None = None):
        self.depth = depth
        self.tag = tag
        message = "Cannot close element: no open element at this depth"
        details: dict[str, Any] = {"depth": depth}
        if tag:
            message = f"Cannot close <{tag}>: no open element at this depth"
            details["tag"] = tag
        super().__init__(message, details)


class MismatchedTagError(FormatterError):
    """Raised when an end call closes a different element than the last opened one."""

    def __init__(self, expected: str | None, actual: str):
        self.expected = expected
        self.actual = actual
        message = f"Cannot close <{actual}> while <{expected}> is open"
        super().__init__(message, {"expected": expected, "actual": actual})


class InvalidCountError(FormatterError):
    """Raised when a section is opened with a negative element count."""

    def __init__(self, tag: str, count: Any):
        self.tag = tag
        self.count = count
        message = f"Element count for <{tag}> must be a non-negative integer"
        super().__init__(message, {"tag": tag, "count": count})


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(ClreportError):
    """Base exception for validation errors."""

    pass


class InventoryValidationError(ValidationError):
    """Raised when inventory data cannot be loaded or validated."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(message, {"source": source})


class ConfigurationError(ValidationError):
    """Raised when configuration is invalid."""

    def __init__(self, setting: str, message: str, value: Any = None):
        self.setting = setting
        self.value = value
        details = {"setting": setting}
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
