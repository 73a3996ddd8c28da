"""msgbundle - localized message bundles with UTF-8 property files.

Resolves a message key, for a locale, against an ordered stack of message
sources, and formats the result with printf-style arguments. Bundles are
immutable: a mutable builder produces them (freeze) and any bundle can
produce a fresh builder seeded from itself (thaw).

Public API:
    MessageBundle - Immutable resolver (get_message, printf, format,
                    check_not_null, check_argument, thaw)
    MessageBundleBuilder - Mutable provider stack (append/prepend, freeze)
    PropertiesBundle - Bundles over base_<locale>.properties files
    MapMessageSource, PropertiesMessageSource - Message sources
    StaticMessageSourceProvider, LoadingMessageSourceProvider - Providers
    get_bundle - Process-wide registry of named bundles
    ROOT_LOCALE - The root ("no locale") locale code

Exceptions:
    MsgBundleError - Base exception class
    NullReferenceError - None passed where forbidden (also a TypeError)
    IllegalArgumentError - Failed argument check (also a ValueError)
    MessageFormatError - Template and arguments do not match
    BundleLoadingError - Registry aggregation conflict

Submodules:
    msgbundle.source - Message source implementations
    msgbundle.provider - Provider implementations and load tracking
    msgbundle.bundle - Bundle, builder and property-file bundles
    msgbundle.spi - Bundle registry and entry point discovery
    msgbundle.formatting - printf and brace interpolation
    msgbundle.locale_utils - Locale canonicalization and fallback chains
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .bundle import MessageBundle, MessageBundleBuilder, PropertiesBundle
from .errors import (
    BundleLoadingError,
    IllegalArgumentError,
    MessageFormatError,
    MsgBundleError,
    NullReferenceError,
)
from .locale_utils import ROOT_LOCALE
from .provider import LoadingMessageSourceProvider, StaticMessageSourceProvider
from .source import MapMessageSource, MessageSource, PropertiesMessageSource
from .spi import get_bundle

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("msgbundle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Property files are always read as UTF-8, never ISO-8859-1
__recommended_encoding__ = "UTF-8"

__all__ = [
    "ROOT_LOCALE",
    "BundleLoadingError",
    "IllegalArgumentError",
    "LoadingMessageSourceProvider",
    "MapMessageSource",
    "MessageBundle",
    "MessageBundleBuilder",
    "MessageFormatError",
    "MessageSource",
    "MsgBundleError",
    "NullReferenceError",
    "PropertiesBundle",
    "PropertiesMessageSource",
    "StaticMessageSourceProvider",
    "__recommended_encoding__",
    "__version__",
    "get_bundle",
]
