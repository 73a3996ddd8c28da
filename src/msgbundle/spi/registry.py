"""Process-wide bundle registry populated from bundle providers.

Components:
    BundleLoader - All-or-nothing aggregation of provider bundles
    MessageBundleRegistry - Lazily populated, thread-safe name -> bundle table
    discover_providers - Built-in provider plus entry point discovery
    get_bundle - Lookup in the default process-wide registry

Aggregation rules:
    - a None name fails the load: "null bundle names are not allowed"
    - a None bundle fails the load: "null bundles are not allowed"
    - a name seen before, from an earlier provider or earlier in the same
      load, fails the load: 'there is already a bundle with name "<name>"'
    A failed load commits nothing.

Population:
    The registry runs its provider factory once, on first use, behind a
    lock with double-checked initialization. ensure_loaded() after a
    successful population is a no-op. A failed population leaves the
    registry empty and is retried on the next use. A provider that uses the
    registry during population gets BundleLoadingError.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from importlib.metadata import entry_points
from types import MappingProxyType
from typing import TYPE_CHECKING

from msgbundle.constants import ENTRY_POINT_GROUP
from msgbundle.errors import BundleLoadingError
from msgbundle.spi.builtin import MsgBundleMessages

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from msgbundle.bundle.bundle import MessageBundle
    from msgbundle.spi.base import MessageBundleProvider
    from msgbundle.types import BundleName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "BundleLoader",
    "MessageBundleRegistry",
    "discover_providers",
    "get_bundle",
    # Diagnostics
    "NULL_NAME_MESSAGE",
    "NULL_BUNDLE_MESSAGE",
    "DUPLICATE_NAME_MESSAGE",
]

logger = logging.getLogger(__name__)

# Plain strings: the library's own bundle is not available while loading.
NULL_NAME_MESSAGE = "null bundle names are not allowed"
NULL_BUNDLE_MESSAGE = "null bundles are not allowed"
DUPLICATE_NAME_MESSAGE = 'there is already a bundle with name "{name}"'


class BundleLoader:
    """Aggregate bundles from providers into one name -> bundle table.

    Each load is all-or-nothing: pairs are staged, validated against the
    table and against each other, and committed only if every pair passes.
    Loading the same provider twice fails on the first duplicate name.

    Not thread-safe; MessageBundleRegistry serializes access.

    Example:
        >>> loader = BundleLoader()
        >>> loader.load_from(provider)
        >>> loader.bundles["foo"]
    """

    __slots__ = ("_bundles",)

    def __init__(self) -> None:
        self._bundles: dict[BundleName, MessageBundle] = {}

    def _stage(
        self,
        provider: MessageBundleProvider,
        staged: dict[BundleName, MessageBundle],
    ) -> None:
        for name, bundle in provider.get_bundles().items():
            if name is None:
                raise BundleLoadingError(NULL_NAME_MESSAGE)
            if bundle is None:
                raise BundleLoadingError(NULL_BUNDLE_MESSAGE)
            if name in self._bundles or name in staged:
                raise BundleLoadingError(DUPLICATE_NAME_MESSAGE.format(name=name))
            staged[name] = bundle

    def load_from(self, provider: MessageBundleProvider) -> None:
        """Add every bundle of one provider.

        Raises:
            BundleLoadingError: On a None name, a None bundle or a duplicate
                name; nothing is added in that case
        """
        self.load_all((provider,))

    def load_all(self, providers: Iterable[MessageBundleProvider]) -> None:
        """Add every bundle of several providers as one atomic load.

        Raises:
            BundleLoadingError: On a None name, a None bundle or a duplicate
                name in any provider; nothing is added in that case
        """
        staged: dict[BundleName, MessageBundle] = {}
        for provider in providers:
            self._stage(provider, staged)
        self._bundles.update(staged)
        for name in staged:
            logger.debug("Registered bundle: %s", name)

    @property
    def bundles(self) -> Mapping[BundleName, MessageBundle]:
        """Read-only snapshot of the aggregated bundles."""
        return MappingProxyType(dict(self._bundles))


def discover_providers() -> list[MessageBundleProvider]:
    """Return the built-in provider followed by entry point providers.

    Entry points in the "msgbundle.bundles" group may name a class, which is
    instantiated without arguments, or a ready provider object.

    Returns:
        Providers in registration order
    """
    providers: list[MessageBundleProvider] = [MsgBundleMessages()]
    for entry_point in entry_points(group=ENTRY_POINT_GROUP):
        target = entry_point.load()
        provider = target() if isinstance(target, type) else target
        logger.debug("Discovered bundle provider: %s", entry_point.name)
        providers.append(provider)
    return providers


class MessageBundleRegistry:
    """Thread-safe name -> bundle table, populated once on first use.

    Thread Safety:
        Population runs at most once at a time, behind a lock; the table is
        published only after a complete, successful load. Reads after
        population take no lock.

    Example:
        >>> registry = MessageBundleRegistry(lambda: [MyAppBundles()])
        >>> registry.get_bundle("myapp").get_message("greet")
    """

    __slots__ = ("_bundles", "_lock", "_populating", "_provider_factory")

    def __init__(
        self,
        provider_factory: Callable[[], Iterable[MessageBundleProvider]] = discover_providers,
    ) -> None:
        """Initialize an empty registry.

        Args:
            provider_factory: Returns the providers to aggregate; called on
                first use only
        """
        self._provider_factory = provider_factory
        self._bundles: Mapping[BundleName, MessageBundle] | None = None
        # Reentrant: re-entry during population raises instead of deadlocking
        self._lock = threading.RLock()
        self._populating = False

    @property
    def is_loaded(self) -> bool:
        """Check whether the registry has been populated."""
        return self._bundles is not None

    def ensure_loaded(self) -> Mapping[BundleName, MessageBundle]:
        """Populate the registry if needed and return its table.

        Idempotent: once populated, returns the same table without calling
        the provider factory again.

        Raises:
            BundleLoadingError: If aggregation fails (the registry stays empty),
                or if a provider uses the registry while it is being populated
        """
        bundles = self._bundles
        if bundles is not None:
            return bundles

        with self._lock:
            if self._bundles is None:
                if self._populating:
                    msg = "Bundle registry used while it is being populated"
                    raise BundleLoadingError(msg)
                self._populating = True
                try:
                    loader = BundleLoader()
                    loader.load_all(self._provider_factory())
                    self._bundles = loader.bundles
                finally:
                    self._populating = False
                logger.info("Bundle registry populated with %d bundle(s)", len(self._bundles))
            return self._bundles

    def get_bundle(self, name: BundleName) -> MessageBundle:
        """Return the bundle registered under name.

        Raises:
            KeyError: If no bundle has this name
            BundleLoadingError: If the registry cannot be populated
        """
        bundles = self.ensure_loaded()
        try:
            return bundles[name]
        except KeyError:
            msg = f"No bundle registered with name {name!r}"
            raise KeyError(msg) from None

    def names(self) -> tuple[BundleName, ...]:
        """Registered bundle names, in registration order."""
        return tuple(self.ensure_loaded())

    def __contains__(self, name: object) -> bool:
        return name in self.ensure_loaded()

    def __repr__(self) -> str:
        if self._bundles is None:
            return "MessageBundleRegistry(loaded=False)"
        return f"MessageBundleRegistry(bundles={len(self._bundles)})"


_default_registry = MessageBundleRegistry()


def get_bundle(name: BundleName) -> MessageBundle:
    """Return a bundle from the process-wide registry.

    The registry is populated on first call from discover_providers().

    Raises:
        KeyError: If no bundle has this name
        BundleLoadingError: If the registry cannot be populated
    """
    return _default_registry.get_bundle(name)
