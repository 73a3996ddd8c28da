"""msgbundle exception hierarchy.

Two reporting strategies coexist in the library. A key that no source knows
is NOT an error: MessageBundle.get_message() returns a visible sentinel
string instead. Everything below is raised.

Hierarchy:
    MsgBundleError (base)
    ├─ NullReferenceError (also a TypeError; None passed where forbidden)
    ├─ IllegalArgumentError (also a ValueError; failed argument check)
    ├─ MessageFormatError (template found, arguments do not fit it)
    └─ BundleLoadingError (bundle registry aggregation conflict)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "BundleLoadingError",
    "IllegalArgumentError",
    "MessageFormatError",
    "MsgBundleError",
    "NullReferenceError",
]


class MsgBundleError(Exception):
    """Base exception for all msgbundle errors."""


class NullReferenceError(MsgBundleError, TypeError):
    """A reference that must not be None was None.

    Raised by MessageBundle.check_not_null() and by every public operation
    of the library that receives None for a key, locale, source, provider
    or bundle. Subclasses TypeError so callers that only know the builtin
    hierarchy still catch it.
    """


class IllegalArgumentError(MsgBundleError, ValueError):
    """An argument failed a precondition check.

    Raised by MessageBundle.check_argument() and for malformed locale
    identifiers.
    """


class MessageFormatError(MsgBundleError):
    """A message template could not be interpolated with the given arguments.

    Distinct from a resolution miss: the template was found, but its
    placeholders do not match the supplied arguments (wrong count, wrong
    type, or malformed specifier).

    Attributes:
        template: The raw template that failed to format
        key: Message key the template was resolved from (None when
            interpolate() is called directly)
    """

    def __init__(
        self,
        message: str,
        *,
        template: str,
        key: str | None = None,
    ) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Human-readable description of the mismatch
            template: The raw template that failed to format
            key: Message key the template was resolved from
        """
        if key is not None:
            message = f"{message} (key '{key}')"
        super().__init__(message)
        self.template = template
        self.key = key


class BundleLoadingError(MsgBundleError):
    """Bundle registry aggregation failed.

    Raised for a None bundle name, a None bundle, or a name already
    registered. The load that raised it committed nothing.
    """
