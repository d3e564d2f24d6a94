"""Configuration constants for the code generator.

Plain module-level values, so a driver targeting a different C# profile
can override them before building.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

ESCAPE_MARKER = "@"
"""Prefix that turns a C# reserved word into a verbatim identifier."""

# ---------------------------------------------------------------------------
# Modules
# ---------------------------------------------------------------------------

INIT_MODULE_NAME = "__init__"
"""Package initializer module; classes declared in it go straight into the namespace."""

# ---------------------------------------------------------------------------
# Default types and imports
# ---------------------------------------------------------------------------

OBJECT_TYPE_NAME = "object"
LIST_TYPE_NAME = "List"
COLLECTIONS_NAMESPACE = "System.Collections.Generic"
"""Imported whenever a list initializer is built."""
