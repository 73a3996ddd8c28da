"""MessageBundleBuilder - mutable accumulator producing MessageBundle objects.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from msgbundle import _internal
from msgbundle.bundle.bundle import MessageBundle
from msgbundle.provider.static import StaticMessageSourceProvider

if TYPE_CHECKING:
    from collections.abc import Iterable

    from msgbundle.provider.base import MessageSourceProvider
    from msgbundle.source.base import MessageSource

__all__ = ["MessageBundleBuilder"]

logger = logging.getLogger(__name__)


class MessageBundleBuilder:
    """Ordered, mutable list of providers; freeze() turns it into a bundle.

    Providers checked first come first. append_*() adds at the end (lowest
    precedence so far); prepend_*() adds at the front (highest precedence so
    far). A bare MessageSource is wrapped into a provider that returns it
    for every locale.

    freeze() snapshots the list: changing the builder afterwards does not
    affect bundles already frozen from it, and the builder can be reused.

    Thread Safety:
        NOT thread-safe. Build on one thread, then share the frozen bundle.

    Example:
        >>> bundle = (
        ...     MessageBundleBuilder()
        ...     .append_source(defaults)      # checked second
        ...     .prepend_source(overrides)    # checked first
        ...     .freeze()
        ... )
    """

    __slots__ = ("_providers",)

    def __init__(self, providers: Iterable[MessageSourceProvider] = ()) -> None:
        """Initialize with an optional initial provider sequence (copied).

        Raises:
            NullReferenceError: If any provider is None
        """
        self._providers: list[MessageSourceProvider] = [
            _internal.not_null(provider, "cfg.nullProvider") for provider in providers
        ]

    @staticmethod
    def _wrap(source: MessageSource) -> MessageSourceProvider:
        _internal.not_null(source, "cfg.nullSource")
        return StaticMessageSourceProvider.with_single_source(source)

    def append_provider(self, provider: MessageSourceProvider) -> Self:
        """Add a provider with the lowest precedence so far.

        Raises:
            NullReferenceError: If provider is None
        """
        self._providers.append(_internal.not_null(provider, "cfg.nullProvider"))
        return self

    def prepend_provider(self, provider: MessageSourceProvider) -> Self:
        """Add a provider with the highest precedence so far.

        Raises:
            NullReferenceError: If provider is None
        """
        self._providers.insert(0, _internal.not_null(provider, "cfg.nullProvider"))
        return self

    def append_source(self, source: MessageSource) -> Self:
        """Add a source, used for every locale, with the lowest precedence so far.

        Raises:
            NullReferenceError: If source is None
        """
        return self.append_provider(self._wrap(source))

    def prepend_source(self, source: MessageSource) -> Self:
        """Add a source, used for every locale, with the highest precedence so far.

        Raises:
            NullReferenceError: If source is None
        """
        return self.prepend_provider(self._wrap(source))

    def append_bundle(self, bundle: MessageBundle) -> Self:
        """Add all providers of a bundle, in their order, after the current ones.

        Raises:
            NullReferenceError: If bundle is None
        """
        self._providers.extend(_internal.not_null(bundle, "cfg.nullBundle").providers)
        return self

    def prepend_bundle(self, bundle: MessageBundle) -> Self:
        """Add all providers of a bundle, in their order, before the current ones.

        Raises:
            NullReferenceError: If bundle is None
        """
        self._providers[0:0] = _internal.not_null(bundle, "cfg.nullBundle").providers
        return self

    @property
    def providers(self) -> tuple[MessageSourceProvider, ...]:
        """Snapshot of the current provider sequence."""
        return tuple(self._providers)

    def freeze(self) -> MessageBundle:
        """Build an immutable bundle from a snapshot of the providers."""
        logger.debug("Freezing MessageBundle with %d provider(s)", len(self._providers))
        return MessageBundle(self._providers)

    def __repr__(self) -> str:
        return f"MessageBundleBuilder(providers={len(self._providers)})"
