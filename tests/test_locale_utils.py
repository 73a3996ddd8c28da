"""Tests for locale canonicalization, fallback chains and system locale detection."""

from __future__ import annotations

import pytest
from hypothesis import event, given

from msgbundle.errors import IllegalArgumentError, NullReferenceError
from msgbundle.locale_utils import (
    ROOT_LOCALE,
    canonicalize_locale,
    get_system_locale,
    is_root_locale,
    locale_fallback_chain,
    normalize_locale,
)
from tests.strategies import locale_codes


class TestNormalizeLocale:
    """Tests for normalize_locale()."""

    def test_hyphens_become_underscores(self) -> None:
        """BCP-47 separators are converted to POSIX separators."""
        assert normalize_locale("en-US") == "en_US"
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    def test_case_is_untouched(self) -> None:
        """normalize_locale() does not change case."""
        assert normalize_locale("EN-us") == "EN_us"


class TestCanonicalizeLocale:
    """Tests for canonicalize_locale()."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("en", "en"),
            ("EN", "en"),
            ("en-us", "en_US"),
            ("en_US", "en_US"),
            ("fr_fr", "fr_FR"),
            ("zh-hans-cn", "zh_Hans_CN"),
            ("en_US_POSIX", "en_US_POSIX"),
            ("de_DE.UTF-8", "de_DE"),
        ],
    )
    def test_canonical_spelling(self, raw: str, expected: str) -> None:
        """Locale codes are canonicalized regardless of separator and case."""
        assert canonicalize_locale(raw) == expected

    @pytest.mark.parametrize("raw", ["", "root", "ROOT", "  "])
    def test_root_aliases(self, raw: str) -> None:
        """The empty string and 'root' both denote the root locale."""
        assert canonicalize_locale(raw) == ROOT_LOCALE

    def test_none_rejected(self) -> None:
        """A None locale raises NullReferenceError with the library message."""
        with pytest.raises(NullReferenceError, match="cannot query null locale"):
            canonicalize_locale(None)

    def test_invalid_rejected(self) -> None:
        """A malformed identifier raises IllegalArgumentError naming it."""
        with pytest.raises(IllegalArgumentError, match='invalid locale identifier "123"'):
            canonicalize_locale("123")

    def test_invalid_is_value_error(self) -> None:
        """IllegalArgumentError is also a ValueError."""
        with pytest.raises(ValueError, match="invalid locale identifier"):
            canonicalize_locale("e1")

    @given(locale=locale_codes())
    def test_idempotent(self, locale: str) -> None:
        """Canonicalizing a canonical code returns it unchanged."""
        event(f"root={is_root_locale(locale)}")
        assert canonicalize_locale(locale) == locale
        assert canonicalize_locale(canonicalize_locale(locale)) == locale


class TestLocaleFallbackChain:
    """Tests for locale_fallback_chain()."""

    def test_posix_variant_chain(self) -> None:
        """Subtags are removed from the right down to the root locale."""
        assert locale_fallback_chain("en_US_POSIX") == ("en_US_POSIX", "en_US", "en", "")

    def test_script_chain(self) -> None:
        """Script subtags participate in the chain."""
        assert locale_fallback_chain("zh-Hans-CN") == ("zh_Hans_CN", "zh_Hans", "zh", "")

    def test_root_chain(self) -> None:
        """The root locale's chain is the root locale alone."""
        assert locale_fallback_chain(ROOT_LOCALE) == (ROOT_LOCALE,)

    def test_none_rejected(self) -> None:
        """A None locale raises NullReferenceError."""
        with pytest.raises(NullReferenceError):
            locale_fallback_chain(None)

    @given(locale=locale_codes())
    def test_chain_shape(self, locale: str) -> None:
        """The chain starts at the locale, ends at root, and only shortens."""
        chain = locale_fallback_chain(locale)
        event(f"chain_length={len(chain)}")
        assert chain[0] == locale
        assert chain[-1] == ROOT_LOCALE
        assert len(set(chain)) == len(chain)
        for longer, shorter in zip(chain, chain[1:], strict=False):
            assert longer.startswith(shorter)


class TestGetSystemLocale:
    """Tests for get_system_locale()."""

    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)

    def test_lang_with_encoding(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LANG is read and its encoding suffix is stripped."""
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        assert get_system_locale() == "de_DE"

    def test_lc_all_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LC_ALL takes priority over LANG."""
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        monkeypatch.setenv("LC_ALL", "fr_CA.UTF-8")
        assert get_system_locale() == "fr_CA"

    def test_pseudo_locales_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """C and POSIX (with or without encoding) are ignored."""
        monkeypatch.setenv("LC_ALL", "C.UTF-8")
        monkeypatch.setenv("LC_MESSAGES", "POSIX")
        monkeypatch.setenv("LANG", "lv_LV.UTF-8")
        assert get_system_locale() == "lv_LV"

    def test_unset_returns_root(self) -> None:
        """Without any variable the root locale is returned."""
        assert get_system_locale() == ROOT_LOCALE

    def test_unset_raises_on_request(self) -> None:
        """raise_on_failure=True turns an undetectable locale into RuntimeError."""
        with pytest.raises(RuntimeError, match="Could not determine system locale"):
            get_system_locale(raise_on_failure=True)
