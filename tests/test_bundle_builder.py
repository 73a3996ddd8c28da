"""Tests for MessageBundleBuilder and the freeze/thaw lifecycle."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgbundle import (
    MapMessageSource,
    MessageBundle,
    MessageBundleBuilder,
    NullReferenceError,
    StaticMessageSourceProvider,
)
from tests.strategies import locale_codes, message_keys, source_stacks


def _provider(**messages: str) -> StaticMessageSourceProvider:
    return StaticMessageSourceProvider.with_single_source(MapMessageSource(messages))


class TestBuilderOrdering:
    """Tests for append/prepend ordering."""

    def test_append_and_prepend_order(self) -> None:
        """prepend puts ahead of everything so far, append behind."""
        a, b, z = _provider(), _provider(), _provider()
        builder = MessageBundleBuilder().append_provider(b).prepend_provider(a)
        builder.prepend_provider(z)
        assert builder.providers == (z, a, b)

    def test_append_bundle_keeps_its_order(self) -> None:
        """append_bundle adds a bundle's providers, in order, at the end."""
        p1, p2, p3 = _provider(), _provider(), _provider()
        other = MessageBundleBuilder().append_provider(p2).append_provider(p3).freeze()
        builder = MessageBundleBuilder().append_provider(p1).append_bundle(other)
        assert builder.providers == (p1, p2, p3)

    def test_prepend_bundle_keeps_its_order(self) -> None:
        """prepend_bundle adds a bundle's providers, in order, at the front."""
        p1, p2, p3 = _provider(), _provider(), _provider()
        other = MessageBundleBuilder().append_provider(p1).append_provider(p2).freeze()
        builder = MessageBundleBuilder().append_provider(p3).prepend_bundle(other)
        assert builder.providers == (p1, p2, p3)

    def test_sources_are_wrapped(self) -> None:
        """A bare source becomes a provider answering for every locale."""
        source = MapMessageSource({"k": "v"})
        (provider,) = MessageBundleBuilder().append_source(source).providers
        assert provider.get_source("") is source
        assert provider.get_source("ja") is source

    def test_methods_chain(self) -> None:
        """Every mutator returns the builder itself."""
        builder = MessageBundleBuilder()
        source = MapMessageSource({})
        assert builder.append_source(source) is builder
        assert builder.prepend_source(source) is builder
        assert builder.append_provider(_provider()) is builder
        assert builder.prepend_provider(_provider()) is builder
        assert builder.append_bundle(MessageBundle()) is builder
        assert builder.prepend_bundle(MessageBundle()) is builder

    @pytest.mark.parametrize(
        ("method", "message"),
        [
            ("append_source", "source cannot be null"),
            ("prepend_source", "source cannot be null"),
            ("append_provider", "provider cannot be null"),
            ("prepend_provider", "provider cannot be null"),
            ("append_bundle", "bundle cannot be null"),
            ("prepend_bundle", "bundle cannot be null"),
        ],
    )
    def test_none_rejected(self, method: str, message: str) -> None:
        """Every mutator rejects None with the library message."""
        builder = MessageBundleBuilder()
        with pytest.raises(NullReferenceError, match=message):
            getattr(builder, method)(None)
        assert builder.providers == ()

    def test_bundle_constructor_rejects_none(self) -> None:
        """A None provider cannot be smuggled into a bundle."""
        with pytest.raises(NullReferenceError, match="provider cannot be null"):
            MessageBundle([_provider(), None])  # type: ignore[list-item]

    def test_repr(self) -> None:
        """repr() reports the provider count."""
        assert repr(MessageBundleBuilder().append_provider(_provider())) == (
            "MessageBundleBuilder(providers=1)"
        )


class TestFreezeThaw:
    """Tests for freeze() and thaw() independence."""

    def test_freeze_snapshots(self) -> None:
        """Changing the builder after freeze() does not affect the bundle."""
        builder = MessageBundleBuilder().append_provider(_provider(key="first"))
        bundle = builder.freeze()
        builder.prepend_provider(_provider(key="override"))
        assert bundle.get_message("key") == "first"
        assert builder.freeze().get_message("key") == "override"

    def test_thaw_is_independent(self) -> None:
        """A thawed builder shares no storage with its bundle."""
        original = MessageBundleBuilder().append_provider(_provider(a="1")).freeze()
        derived = original.thaw().prepend_provider(_provider(a="2", b="3")).freeze()
        assert original.get_message("a") == "1"
        assert original.get_message("b") == "!b!"
        assert derived.get_message("a") == "2"
        assert derived.get_message("b") == "3"
        assert len(original.providers) == 1

    def test_thaw_preserves_providers(self) -> None:
        """thaw() seeds the builder with the same providers in order."""
        p1, p2 = _provider(), _provider()
        bundle = MessageBundleBuilder().append_provider(p1).append_provider(p2).freeze()
        assert bundle.thaw().providers == (p1, p2)

    def test_builder_factory(self) -> None:
        """MessageBundle.builder() returns an empty builder."""
        builder = MessageBundle.builder()
        assert isinstance(builder, MessageBundleBuilder)
        assert builder.providers == ()

    def test_providers_is_immutable(self) -> None:
        """A bundle exposes its providers as a tuple."""
        bundle = MessageBundleBuilder().append_provider(_provider()).freeze()
        assert isinstance(bundle.providers, tuple)

    @given(
        stack=source_stacks(),
        keys=st.lists(message_keys(), max_size=5),
        locale=locale_codes(),
    )
    def test_thaw_freeze_round_trip(
        self, stack: list[dict[str, str]], keys: list[str], locale: str
    ) -> None:
        """thaw().freeze() resolves every key exactly like the original."""
        builder = MessageBundleBuilder()
        for mapping in stack:
            builder.append_source(MapMessageSource(mapping))
        original = builder.freeze()
        copy = original.thaw().freeze()
        candidates = keys + [key for mapping in stack for key in mapping]
        for key in candidates:
            assert copy.get_message(key, locale=locale) == original.get_message(
                key, locale=locale
            )
