"""Core components for classloader reports."""

from clreport.core.config import Settings, get_settings, load_settings
from clreport.core.exceptions import (
    ClreportError,
    ConfigurationError,
    FormatterError,
    InvalidCountError,
    InventoryValidationError,
    MismatchedTagError,
    UnbalancedNestingError,
    ValidationError,
)
from clreport.core.models import (
    Attribute,
    ClassloaderHandle,
    ClassloaderInventory,
    ClassloaderNode,
    Entry,
    ParentDefinition,
    ParentLink,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "load_settings",
    # Models
    "Attribute",
    "ClassloaderHandle",
    "ClassloaderInventory",
    "ClassloaderNode",
    "Entry",
    "ParentDefinition",
    "ParentLink",
    # Exceptions - Base
    "ClreportError",
    # Exceptions - Formatting
    "FormatterError",
    "UnbalancedNestingError",
    "MismatchedTagError",
    "InvalidCountError",
    # Exceptions - Validation
    "ValidationError",
    "InventoryValidationError",
    "ConfigurationError",
]
