"""Access to the library's own message bundle.

Every contract violation raised by msgbundle carries a message resolved from
the "msgbundle" bundle. It is taken from the built-in provider directly, not
from the process-wide registry: a broken third-party provider that stops the
registry from populating must not change what a contract check raises.

The bundle is only touched on the failure path, so building bundles
(including the library's own) never recurses into it.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from msgbundle.errors import NullReferenceError

if TYPE_CHECKING:
    from msgbundle.bundle.bundle import MessageBundle

__all__ = ["messages", "not_null"]


def messages() -> MessageBundle:
    """Return the library's own message bundle."""
    # Lazy import: spi -> bundle -> provider -> this module
    from msgbundle.spi.builtin import library_bundle  # noqa: PLC0415

    return library_bundle()


def not_null[T](reference: T | None, key: str, *args: object) -> T:
    """Return reference, or raise NullReferenceError with the message for key.

    Args:
        reference: Value that must not be None
        key: Key in the library's own bundle
        *args: printf arguments for the message

    Returns:
        reference, unchanged

    Raises:
        NullReferenceError: If reference is None
    """
    if reference is None:
        raise NullReferenceError(messages().printf(key, *args))
    return reference
