"""Constants used throughout clreport.

This module centralizes tag names, attribute literals and defaults so the
formatters and the writer agree on the document vocabulary.
"""

# =============================================================================
# INDENTATION
# =============================================================================

# One nesting level; fixed, not configurable
INDENT_UNIT = "  "


# =============================================================================
# CONTAINER TAGS
# =============================================================================

TAG_REPORT = "classloaderreport"
TAG_CLASSLOADER = "classloader"
TAG_ATTRIBUTES = "attributes"
TAG_CHILDREN = "childs"
TAG_ENTRIES = "entries"
TAG_ERRORS = "errors"
TAG_PACKAGES = "packages"
TAG_ROLES = "roles"
TAG_UNASSIGNED_ROLES = "unassigned-roles"


# =============================================================================
# LEAF TAGS
# =============================================================================

TAG_ATTRIBUTE = "attribute"
TAG_CHILD = "child"
TAG_CLASS = "class"
TAG_ENTRY = "entry"
TAG_ERROR = "error"
TAG_PARENT = "parent"
TAG_PACKAGE = "package"
TAG_ROLE = "role"


# =============================================================================
# ATTRIBUTE VALUES
# =============================================================================

# Parent definition literals, spelled as consumers of the report expect them
PARENT_DEFINITION_EXPLICIT = "explicitely"
PARENT_DEFINITION_DEFAULT = "default"

# Entry type used for URL classpath entries
ENTRY_TYPE_URL = "url"


# =============================================================================
# OUTPUT
# =============================================================================

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
LINE_SEPARATOR = "\n"
JSON_INDENT = 2
