"""Static message source provider.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

from msgbundle import _internal
from msgbundle.locale_utils import canonicalize_locale
from msgbundle.types import LocaleCode

if TYPE_CHECKING:
    from msgbundle.source.base import MessageSource

__all__ = ["StaticMessageSourceProvider"]

logger = logging.getLogger(__name__)


class StaticMessageSourceProvider:
    """Provider backed by a fixed locale to source table.

    Lookup is exact: a source registered for "fr" is NOT used for "fr_FR".
    When no entry matches, the default source is returned (None if no
    default was set). Locale fallback across subtags is the business of the
    sources' authors, or of a LoadingMessageSourceProvider.

    Instances are immutable and safe to share between threads. Build them
    with a Builder, or with with_single_source() for the common case.

    Example:
        >>> provider = (
        ...     StaticMessageSourceProvider.builder()
        ...     .set_default_source(english)
        ...     .add_source("fr", french)
        ...     .build()
        ... )
        >>> provider.get_source("fr") is french
        True
        >>> provider.get_source("fr_CA") is english
        True
    """

    __slots__ = ("_default_source", "_sources")

    def __init__(
        self,
        sources: Mapping[LocaleCode, MessageSource] | None = None,
        default_source: MessageSource | None = None,
    ) -> None:
        """Initialize from a locale table and an optional default source.

        Locale keys are canonicalized; the table is copied.

        Args:
            sources: Locale to source mapping
            default_source: Source for locales absent from the table

        Raises:
            NullReferenceError: If a locale or source in the table is None
            IllegalArgumentError: If a locale is malformed
        """
        table: dict[LocaleCode, MessageSource] = {}
        for locale, source in (sources or {}).items():
            _internal.not_null(locale, "cfg.nullLocale")
            table[canonicalize_locale(locale)] = _internal.not_null(source, "cfg.nullSource")
        self._sources: Mapping[LocaleCode, MessageSource] = MappingProxyType(table)
        self._default_source = default_source

    @classmethod
    def builder(cls) -> StaticMessageSourceProvider.Builder:
        """Create a new, empty builder."""
        return cls.Builder()

    @classmethod
    def with_single_source(
        cls,
        source: MessageSource,
        locale: LocaleCode | None = None,
    ) -> Self:
        """Create a provider with exactly one source.

        Args:
            source: The message source
            locale: If None, the source becomes the default source and
                answers for every locale; otherwise it answers only for
                this locale

        Raises:
            NullReferenceError: If source is None
        """
        _internal.not_null(source, "cfg.nullSource")
        if locale is None:
            return cls(default_source=source)
        return cls({locale: source})

    def get_source(self, locale: LocaleCode) -> MessageSource | None:
        """Return the source registered for locale, else the default source.

        Raises:
            NullReferenceError: If locale is None
            IllegalArgumentError: If locale is malformed
        """
        canonical = canonicalize_locale(locale)
        return self._sources.get(canonical, self._default_source)

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locales with a dedicated source, in registration order."""
        return tuple(self._sources)

    @property
    def default_source(self) -> MessageSource | None:
        """Source used when no locale entry matches."""
        return self._default_source

    def __repr__(self) -> str:
        return (
            f"StaticMessageSourceProvider(locales={self.locales!r}, "
            f"default={self._default_source is not None})"
        )

    class Builder:
        """Mutable accumulator for a StaticMessageSourceProvider. Not thread-safe."""

        __slots__ = ("_default_source", "_sources")

        def __init__(self) -> None:
            self._sources: dict[LocaleCode, MessageSource] = {}
            self._default_source: MessageSource | None = None

        def add_source(self, locale: LocaleCode, source: MessageSource) -> Self:
            """Register a source for one locale, replacing any previous one.

            Raises:
                NullReferenceError: If locale or source is None
                IllegalArgumentError: If locale is malformed
            """
            _internal.not_null(locale, "cfg.nullLocale")
            _internal.not_null(source, "cfg.nullSource")
            self._sources[canonicalize_locale(locale)] = source
            return self

        def set_default_source(self, source: MessageSource) -> Self:
            """Set the source answering for locales without an entry.

            Raises:
                NullReferenceError: If source is None
            """
            self._default_source = _internal.not_null(source, "cfg.nullDefaultSource")
            return self

        def build(self) -> StaticMessageSourceProvider:
            """Build the provider from a copy of the current table."""
            logger.debug(
                "Built StaticMessageSourceProvider: %d locale(s), default=%s",
                len(self._sources),
                self._default_source is not None,
            )
            return StaticMessageSourceProvider(self._sources, self._default_source)
