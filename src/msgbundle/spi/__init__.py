"""Bundle registry: named bundles contributed by providers.

Submodules:
    base     - MessageBundleProvider protocol
    builtin  - MsgBundleMessages (the library's own "msgbundle" bundle)
    registry - BundleLoader, MessageBundleRegistry, discover_providers, get_bundle

Python 3.13+.
"""

from msgbundle.spi.base import MessageBundleProvider
from msgbundle.spi.builtin import MsgBundleMessages
from msgbundle.spi.registry import (
    BundleLoader,
    MessageBundleRegistry,
    discover_providers,
    get_bundle,
)

__all__ = [
    "BundleLoader",
    "MessageBundleProvider",
    "MessageBundleRegistry",
    "MsgBundleMessages",
    "discover_providers",
    "get_bundle",
]
