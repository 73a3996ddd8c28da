"""Type aliases shared across msgbundle.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "BundleName",
    "LocaleCode",
    "MessageKey",
    "MessageTemplate",
]

type LocaleCode = str
"""Canonical POSIX locale code (e.g., 'en', 'fr_FR', 'en_US_POSIX'); '' is the root locale."""

type MessageKey = str
"""Symbolic message key (e.g., 'cfg.nullSource', 'greet')."""

type MessageTemplate = str
"""Raw, unformatted message text as stored in a message source."""

type BundleName = str
"""Registry name of a MessageBundle (e.g., 'msgbundle')."""
