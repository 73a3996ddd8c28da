"""Message bundles: immutable provider stacks and their builder.

Submodules:
    bundle     - MessageBundle (resolution, printf, precondition helpers)
    builder    - MessageBundleBuilder (freeze/thaw lifecycle)
    properties - PropertiesBundle (bundles over UTF-8 property files)

Python 3.13+.
"""

from msgbundle.bundle.builder import MessageBundleBuilder
from msgbundle.bundle.bundle import MessageBundle
from msgbundle.bundle.properties import PropertiesBundle, PropertiesSourceLoader

__all__ = [
    "MessageBundle",
    "MessageBundleBuilder",
    "PropertiesBundle",
    "PropertiesSourceLoader",
]
