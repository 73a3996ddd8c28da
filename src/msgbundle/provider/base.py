"""Provider protocols.

A MessageSourceProvider owns the locale policy of one tier of a bundle:
it maps a requested locale to at most one MessageSource. A
MessageSourceLoader is the I/O half of a LoadingMessageSourceProvider.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from msgbundle.types import LocaleCode

if TYPE_CHECKING:
    from msgbundle.source.base import MessageSource

__all__ = [
    "MessageSourceLoader",
    "MessageSourceProvider",
]


@runtime_checkable
class MessageSourceProvider(Protocol):
    """Resolve the message source to use for a locale.

    Implementations must be immutable once built (a lazily filled cache is
    allowed if it is internally synchronized) and must reject a None locale.
    """

    def get_source(self, locale: LocaleCode) -> MessageSource | None:
        """Return the message source for locale, or None if there is none.

        Args:
            locale: Requested locale code

        Returns:
            A MessageSource, or None

        Raises:
            NullReferenceError: If locale is None
        """


class MessageSourceLoader(Protocol):
    """Load the message source for one locale.

    Any callable with this signature qualifies, including plain functions
    and lambdas. The loader receives the canonical requested locale and is
    free to decide what to materialize for it (for instance, a file for a
    coarser locale).

    Returning None, or raising FileNotFoundError, means "nothing for this
    locale". Any other exception is recorded as a load error. Neither
    escapes the provider.

    Example:
        >>> def load(locale: str) -> MessageSource | None:
        ...     path = Path(f"locales/messages_{locale}.properties")
        ...     return PropertiesMessageSource.from_path(path)
    """

    def __call__(self, locale: LocaleCode) -> MessageSource | None: ...
