"""Loading message source provider.

Resolves sources lazily through a loader callable, once per distinct
locale, and keeps every outcome for the provider's whole lifetime.

Components:
    LoadingMessageSourceProvider - Lazy, cached, thread-safe provider
    SourceLoadResult - Immutable record of one loader invocation
    LoadSummary - Immutable aggregate of all load results so far

Caching and concurrency:
    The cache maps canonical locale -> SourceLoadResult. A provider-wide lock
    guards the cache and a table of per-locale locks; the loader itself runs
    under the per-locale lock only. Concurrent first requests for the same
    locale therefore converge on a single loader call, while loads for
    different locales proceed in parallel.

Failure policy:
    A loader that returns None or raises FileNotFoundError yields NOT_FOUND.
    Any other exception yields ERROR and is logged. Either way the provider
    answers with its default source (or None), so a lower tier of the
    bundle may still resolve the key.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from msgbundle import _internal
from msgbundle.enums import LoadStatus
from msgbundle.locale_utils import canonicalize_locale
from msgbundle.types import LocaleCode

if TYPE_CHECKING:
    from msgbundle.provider.base import MessageSourceLoader
    from msgbundle.source.base import MessageSource

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Provider
    "LoadingMessageSourceProvider",
    # Load result types
    "SourceLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceLoadResult:
    """Result of invoking the loader for one locale.

    Attributes:
        locale: Canonical locale the loader was invoked for
        status: Load status (success, not_found, error)
        source: Loaded source if status is SUCCESS, None otherwise
        error: Exception if status is ERROR (or the FileNotFoundError for
            NOT_FOUND), None otherwise
    """

    locale: LocaleCode
    status: LoadStatus
    source: MessageSource | None = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the loader produced a source."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the loader had nothing for this locale."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the loader failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of the load results of one provider.

    Attributes:
        results: Individual load results, in first-request order

    Example:
        >>> summary = provider.get_load_summary()
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.locale}: {result.error}")
    """

    results: tuple[SourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of loader invocations."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of locales the loader had nothing for."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of failed loads."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any load failed with an error."""
        return self.errors > 0

    def get_errors(self) -> tuple[SourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[SourceLoadResult, ...]:
        """Get all results where the loader had nothing."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[SourceLoadResult, ...]:
        """Get all successful results."""
        return tuple(r for r in self.results if r.is_success)


class LoadingMessageSourceProvider:
    """Provider invoking a loader on first request for each locale.

    The loader is handed exactly the canonical requested locale and its
    result is cached under that locale: repeated requests never invoke it
    again, whether it succeeded or not.

    Thread Safety:
        get_source() is safe to call from many threads. The loader is
        invoked at most once per distinct locale.

    Example:
        >>> def load(locale: str) -> MessageSource | None:
        ...     return PropertiesMessageSource.from_path(f"i18n/app_{locale}.properties")
        >>> provider = LoadingMessageSourceProvider(load, default_source=english)
        >>> provider.get_source("de")  # reads i18n/app_de.properties
        >>> provider.get_source("de")  # served from the cache

    Attributes:
        default_source: Source returned when the loader yields nothing
    """

    __slots__ = ("_cache", "_default_source", "_loader", "_locale_locks", "_lock")

    def __init__(
        self,
        loader: MessageSourceLoader,
        *,
        default_source: MessageSource | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            loader: Callable mapping a locale to a MessageSource (or None)
            default_source: Source used when the loader yields nothing

        Raises:
            NullReferenceError: If loader is None
        """
        self._loader = _internal.not_null(loader, "cfg.nullLoader")
        self._default_source = default_source
        self._cache: dict[LocaleCode, SourceLoadResult] = {}
        self._locale_locks: dict[LocaleCode, threading.Lock] = {}
        self._lock = threading.Lock()

    def get_source(self, locale: LocaleCode) -> MessageSource | None:
        """Return the loaded source for locale, else the default source.

        The first call for a locale may block on I/O performed by the loader.

        Raises:
            NullReferenceError: If locale is None
            IllegalArgumentError: If locale is malformed
        """
        canonical = canonicalize_locale(locale)
        result = self._get_or_load(canonical)
        if result.source is not None:
            return result.source
        return self._default_source

    def _get_or_load(self, locale: LocaleCode) -> SourceLoadResult:
        # Fast path: already cached
        with self._lock:
            cached = self._cache.get(locale)
            if cached is not None:
                return cached
            locale_lock = self._locale_locks.setdefault(locale, threading.Lock())

        # Slow path: one loader call per locale. Double-check after acquiring
        # the per-locale lock: another thread may have finished the load.
        with locale_lock:
            with self._lock:
                cached = self._cache.get(locale)
            if cached is not None:
                return cached

            result = self._load(locale)
            with self._lock:
                self._cache[locale] = result
                self._locale_locks.pop(locale, None)
            return result

    def _load(self, locale: LocaleCode) -> SourceLoadResult:
        """Invoke the loader and classify its outcome."""
        try:
            source = self._loader(locale)
        except FileNotFoundError as e:
            logger.debug("No message source for locale '%s': %s", locale, e)
            return SourceLoadResult(locale=locale, status=LoadStatus.NOT_FOUND, error=e)
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Errors never escape get_source(); they stay in the load summary
            logger.warning(
                "Failed to load message source for locale '%s': %s: %s",
                locale,
                type(e).__name__,
                e,
            )
            return SourceLoadResult(locale=locale, status=LoadStatus.ERROR, error=e)

        if source is None:
            logger.debug("Loader returned no message source for locale '%s'", locale)
            return SourceLoadResult(locale=locale, status=LoadStatus.NOT_FOUND)

        logger.debug("Loaded message source for locale '%s'", locale)
        return SourceLoadResult(locale=locale, status=LoadStatus.SUCCESS, source=source)

    @property
    def default_source(self) -> MessageSource | None:
        """Source returned when the loader yields nothing."""
        return self._default_source

    def get_load_summary(self) -> LoadSummary:
        """Get a snapshot of every load performed so far.

        Returns:
            LoadSummary over the cached results
        """
        with self._lock:
            return LoadSummary(results=tuple(self._cache.values()))

    def __repr__(self) -> str:
        with self._lock:
            loaded = len(self._cache)
        return (
            f"LoadingMessageSourceProvider(loaded={loaded}, "
            f"default={self._default_source is not None})"
        )
