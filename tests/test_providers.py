"""Tests for StaticMessageSourceProvider and LoadingMessageSourceProvider."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from msgbundle.enums import LoadStatus
from msgbundle.errors import IllegalArgumentError, NullReferenceError
from msgbundle.provider import (
    LoadingMessageSourceProvider,
    LoadSummary,
    MessageSourceProvider,
    SourceLoadResult,
    StaticMessageSourceProvider,
)
from msgbundle.source import MapMessageSource, MessageSource

ENGLISH = MapMessageSource({"greet": "Hello"})
FRENCH = MapMessageSource({"greet": "Bonjour"})


class TestStaticMessageSourceProvider:
    """Tests for StaticMessageSourceProvider."""

    def test_exact_match(self) -> None:
        """A registered locale returns its source."""
        provider = StaticMessageSourceProvider.builder().add_source("fr", FRENCH).build()
        assert provider.get_source("fr") is FRENCH

    def test_no_subtag_fallback(self) -> None:
        """A source for 'fr' is not used for 'fr_FR'."""
        provider = StaticMessageSourceProvider.builder().add_source("fr", FRENCH).build()
        assert provider.get_source("fr_FR") is None

    def test_default_source(self) -> None:
        """Unregistered locales get the default source."""
        provider = (
            StaticMessageSourceProvider.builder()
            .set_default_source(ENGLISH)
            .add_source("fr", FRENCH)
            .build()
        )
        assert provider.get_source("fr_CA") is ENGLISH
        assert provider.get_source("") is ENGLISH
        assert provider.default_source is ENGLISH

    def test_locales_are_canonicalized(self) -> None:
        """Registration and lookup both canonicalize locale codes."""
        provider = StaticMessageSourceProvider.builder().add_source("fr-ca", FRENCH).build()
        assert provider.locales == ("fr_CA",)
        assert provider.get_source("FR_ca") is FRENCH

    def test_constructor_table(self) -> None:
        """The constructor accepts a locale table directly."""
        provider = StaticMessageSourceProvider({"en-US": ENGLISH, "fr": FRENCH})
        assert provider.locales == ("en_US", "fr")
        assert provider.get_source("en_US") is ENGLISH

    def test_with_single_source_default(self) -> None:
        """Without a locale the single source answers for every locale."""
        provider = StaticMessageSourceProvider.with_single_source(ENGLISH)
        assert provider.get_source("") is ENGLISH
        assert provider.get_source("ja") is ENGLISH

    def test_with_single_source_locale(self) -> None:
        """With a locale the single source answers only for it."""
        provider = StaticMessageSourceProvider.with_single_source(FRENCH, "fr")
        assert provider.get_source("fr") is FRENCH
        assert provider.get_source("en") is None

    def test_satisfies_protocol(self) -> None:
        """StaticMessageSourceProvider is a MessageSourceProvider."""
        assert isinstance(StaticMessageSourceProvider(), MessageSourceProvider)

    def test_builder_reuse(self) -> None:
        """Providers already built are unaffected by later builder changes."""
        builder = StaticMessageSourceProvider.builder().add_source("fr", FRENCH)
        first = builder.build()
        builder.add_source("en", ENGLISH).set_default_source(ENGLISH)
        assert first.get_source("en") is None
        assert builder.build().get_source("en") is ENGLISH

    def test_none_locale_query(self) -> None:
        """Querying a None locale raises NullReferenceError."""
        provider = StaticMessageSourceProvider.with_single_source(ENGLISH)
        with pytest.raises(NullReferenceError, match="cannot query null locale"):
            provider.get_source(None)  # type: ignore[arg-type]

    def test_invalid_locale_query(self) -> None:
        """Querying a malformed locale raises IllegalArgumentError."""
        provider = StaticMessageSourceProvider.with_single_source(ENGLISH)
        with pytest.raises(IllegalArgumentError):
            provider.get_source("e1")

    def test_builder_rejects_none(self) -> None:
        """The builder rejects None locales and sources with library messages."""
        builder = StaticMessageSourceProvider.builder()
        with pytest.raises(NullReferenceError, match="locale cannot be null"):
            builder.add_source(None, ENGLISH)  # type: ignore[arg-type]
        with pytest.raises(NullReferenceError, match="^source cannot be null"):
            builder.add_source("en", None)  # type: ignore[arg-type]
        with pytest.raises(NullReferenceError, match="default source cannot be null"):
            builder.set_default_source(None)  # type: ignore[arg-type]

    def test_constructor_rejects_none_locale(self) -> None:
        """A None locale key in the constructor table is a null configuration locale."""
        with pytest.raises(NullReferenceError, match="^locale cannot be null"):
            StaticMessageSourceProvider({None: ENGLISH})  # type: ignore[dict-item]

    def test_single_source_rejects_none(self) -> None:
        """with_single_source(None) raises NullReferenceError."""
        with pytest.raises(NullReferenceError, match="source cannot be null"):
            StaticMessageSourceProvider.with_single_source(None)  # type: ignore[arg-type]


class _CountingLoader:
    """Loader returning a fixed table of sources and counting calls per locale."""

    def __init__(self, sources: dict[str, MessageSource], delay: float = 0.0) -> None:
        self.sources = sources
        self.delay = delay
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def __call__(self, locale: str) -> MessageSource | None:
        with self._lock:
            self.calls.append(locale)
        if self.delay:
            time.sleep(self.delay)
        return self.sources.get(locale)


class TestLoadingMessageSourceProvider:
    """Tests for LoadingMessageSourceProvider."""

    def test_loads_once_per_locale(self) -> None:
        """The loader runs once per locale; later requests hit the cache."""
        loader = _CountingLoader({"fr": FRENCH})
        provider = LoadingMessageSourceProvider(loader)
        assert provider.get_source("fr") is FRENCH
        assert provider.get_source("fr") is FRENCH
        assert provider.get_source("FR") is FRENCH
        assert loader.calls == ["fr"]

    def test_loader_receives_canonical_locale(self) -> None:
        """The loader is handed exactly the canonical requested locale."""
        loader = _CountingLoader({})
        provider = LoadingMessageSourceProvider(loader)
        provider.get_source("en-us")
        provider.get_source("root")
        assert loader.calls == ["en_US", ""]

    def test_none_result_is_cached(self) -> None:
        """A None result is remembered and falls back to the default source."""
        loader = _CountingLoader({})
        provider = LoadingMessageSourceProvider(loader, default_source=ENGLISH)
        assert provider.get_source("de") is ENGLISH
        assert provider.get_source("de") is ENGLISH
        assert loader.calls == ["de"]
        summary = provider.get_load_summary()
        assert summary.not_found == 1
        assert summary.get_not_found()[0].locale == "de"

    def test_none_result_without_default(self) -> None:
        """Without a default source a miss yields None."""
        provider = LoadingMessageSourceProvider(lambda _locale: None)
        assert provider.get_source("de") is None
        assert provider.default_source is None

    def test_file_not_found_is_not_found(self) -> None:
        """FileNotFoundError from the loader means nothing for this locale."""

        def loader(locale: str) -> MessageSource:
            msg = f"no file for {locale}"
            raise FileNotFoundError(msg)

        provider = LoadingMessageSourceProvider(loader, default_source=ENGLISH)
        assert provider.get_source("de") is ENGLISH
        (result,) = provider.get_load_summary().results
        assert result.status == LoadStatus.NOT_FOUND
        assert isinstance(result.error, FileNotFoundError)

    def test_loader_error_is_contained(self, caplog: pytest.LogCaptureFixture) -> None:
        """Other loader exceptions are recorded and logged, never raised."""
        calls: list[str] = []

        def loader(locale: str) -> MessageSource:
            calls.append(locale)
            msg = "disk on fire"
            raise RuntimeError(msg)

        provider = LoadingMessageSourceProvider(loader, default_source=ENGLISH)
        with caplog.at_level(logging.WARNING, logger="msgbundle.provider.loading"):
            assert provider.get_source("de") is ENGLISH
            assert provider.get_source("de") is ENGLISH
        assert calls == ["de"]
        assert "disk on fire" in caplog.text
        summary = provider.get_load_summary()
        assert summary.has_errors
        assert summary.get_errors()[0].is_error
        assert isinstance(summary.get_errors()[0].error, RuntimeError)

    def test_summary_counts(self) -> None:
        """The load summary counts each outcome once per locale."""
        def loader(locale: str) -> MessageSource | None:
            if locale == "bad":
                msg = "broken"
                raise OSError(msg)
            return {"fr": FRENCH}.get(locale)

        provider = LoadingMessageSourceProvider(loader)
        for locale in ("fr", "de", "bad", "fr"):
            provider.get_source(locale)
        summary = provider.get_load_summary()
        assert summary.total_attempted == 3
        assert summary.successful == 1
        assert summary.not_found == 1
        assert summary.errors == 1
        assert [r.locale for r in summary.get_successful()] == ["fr"]
        assert repr(summary) == "LoadSummary(total=3, ok=1, not_found=1, errors=1)"

    def test_none_loader_rejected(self) -> None:
        """A None loader raises NullReferenceError."""
        with pytest.raises(NullReferenceError, match="loader cannot be null"):
            LoadingMessageSourceProvider(None)  # type: ignore[arg-type]

    def test_none_locale_query(self) -> None:
        """Querying a None locale raises NullReferenceError without loading."""
        loader = _CountingLoader({})
        provider = LoadingMessageSourceProvider(loader)
        with pytest.raises(NullReferenceError):
            provider.get_source(None)  # type: ignore[arg-type]
        assert loader.calls == []

    def test_concurrent_first_requests_load_once(self) -> None:
        """Concurrent first requests for one locale share a single load."""
        loader = _CountingLoader({"fr": FRENCH}, delay=0.05)
        provider = LoadingMessageSourceProvider(loader)
        barrier = threading.Barrier(16)

        def request() -> MessageSource | None:
            barrier.wait()
            return provider.get_source("fr")

        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(lambda _: request(), range(16)))

        assert all(result is FRENCH for result in results)
        assert loader.calls == ["fr"]

    def test_distinct_locales_load_independently(self) -> None:
        """Each distinct locale is loaded exactly once under concurrency."""
        locales = ["en", "fr", "de", "lv", "ja"]
        loader = _CountingLoader({}, delay=0.01)
        provider = LoadingMessageSourceProvider(loader)

        with ThreadPoolExecutor(max_workers=10) as executor:
            list(executor.map(provider.get_source, locales * 4))

        assert sorted(loader.calls) == sorted(locales)
        assert provider.get_load_summary().total_attempted == len(locales)


class TestSourceLoadResult:
    """Tests for SourceLoadResult status helpers."""

    def test_status_flags(self) -> None:
        """Exactly one status flag is set per result."""
        ok = SourceLoadResult(locale="fr", status=LoadStatus.SUCCESS, source=FRENCH)
        missing = SourceLoadResult(locale="de", status=LoadStatus.NOT_FOUND)
        failed = SourceLoadResult(locale="ja", status=LoadStatus.ERROR, error=OSError())
        assert (ok.is_success, ok.is_not_found, ok.is_error) == (True, False, False)
        assert (missing.is_success, missing.is_not_found, missing.is_error) == (False, True, False)
        assert (failed.is_success, failed.is_not_found, failed.is_error) == (False, False, True)

    def test_empty_summary(self) -> None:
        """An empty summary reports no attempts and no errors."""
        summary = LoadSummary(results=())
        assert summary.total_attempted == 0
        assert not summary.has_errors
