"""The library's own bundle provider.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from msgbundle.bundle.properties import PropertiesBundle
from msgbundle.constants import BUNDLE_NAME, MESSAGES_RESOURCE

if TYPE_CHECKING:
    from collections.abc import Mapping

    from msgbundle.bundle.bundle import MessageBundle
    from msgbundle.types import BundleName

__all__ = ["MsgBundleMessages", "library_bundle"]


@functools.cache
def library_bundle() -> MessageBundle:
    """Return the "msgbundle" bundle, read from msgbundle/messages.properties.

    Built once per process and shared by the registry and by every contract
    check, so the library's messages never depend on third-party providers.
    """
    return PropertiesBundle.for_resource("msgbundle", MESSAGES_RESOURCE)


class MsgBundleMessages:
    """Provides the "msgbundle" bundle."""

    __slots__ = ()

    def get_bundles(self) -> Mapping[BundleName, MessageBundle]:
        return {BUNDLE_NAME: library_bundle()}
