"""Shared constants for msgbundle.

Centralizes the strings and names the rest of the package agrees on.
Placing them here avoids circular imports between the bundle, provider
and registry packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fallback strings
    "FALLBACK_MISSING_KEY",
    # Property files
    "PROPERTIES_SUFFIX",
    "PROPERTIES_ENCODING",
    "LOCALE_SEPARATOR",
    # Registry
    "BUNDLE_NAME",
    "ENTRY_POINT_GROUP",
    "MESSAGES_RESOURCE",
]

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned by MessageBundle.get_message() when no provider knows the key.
# A missing translation shows up as "!key!".
FALLBACK_MISSING_KEY: str = "!{key}!"

# ============================================================================
# PROPERTY FILES
# ============================================================================

PROPERTIES_SUFFIX: str = ".properties"

PROPERTIES_ENCODING: str = "utf-8"

# Separates the base name from the locale: messages_fr_FR.properties
LOCALE_SEPARATOR: str = "_"

# ============================================================================
# REGISTRY
# ============================================================================

# Name of the library's own bundle in the registry.
BUNDLE_NAME: str = "msgbundle"

# importlib.metadata entry point group scanned for MessageBundleProvider objects.
ENTRY_POINT_GROUP: str = "msgbundle.bundles"

# Base name of the package resource holding the library's own messages.
MESSAGES_RESOURCE: str = "messages"
