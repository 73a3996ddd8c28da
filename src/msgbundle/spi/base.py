"""MessageBundleProvider protocol.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from msgbundle.bundle.bundle import MessageBundle
    from msgbundle.types import BundleName

__all__ = ["MessageBundleProvider"]


@runtime_checkable
class MessageBundleProvider(Protocol):
    """Contributes named bundles to the bundle registry.

    Third-party packages register implementations under the
    "msgbundle.bundles" entry point group:

        [project.entry-points."msgbundle.bundles"]
        myapp = "myapp.i18n:MyAppBundles"

    The entry point may name a class (instantiated without arguments) or
    an object with a get_bundles() method.

    Example:
        >>> class MyAppBundles:
        ...     def get_bundles(self) -> Mapping[str, MessageBundle]:
        ...         return {"myapp": PropertiesBundle.for_resource("myapp", "messages")}
    """

    def get_bundles(self) -> Mapping[BundleName, MessageBundle]:
        """Return the bundles this provider contributes, by name."""
