"""Message source providers: locale policy for one tier of a bundle.

Submodules:
    base    - MessageSourceProvider and MessageSourceLoader protocols
    static  - StaticMessageSourceProvider (exact-match table + default)
    loading - LoadingMessageSourceProvider (lazy, cached per locale),
              SourceLoadResult, LoadSummary

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from msgbundle.enums import LoadStatus
from msgbundle.provider.base import MessageSourceLoader, MessageSourceProvider
from msgbundle.provider.loading import LoadingMessageSourceProvider, LoadSummary, SourceLoadResult
from msgbundle.provider.static import StaticMessageSourceProvider

__all__ = [
    # Protocols
    "MessageSourceProvider",
    "MessageSourceLoader",
    # Implementations
    "StaticMessageSourceProvider",
    "LoadingMessageSourceProvider",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "SourceLoadResult",
]
