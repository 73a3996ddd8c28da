"""Enumerations for msgbundle type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of one loader invocation in a LoadingMessageSourceProvider.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Loader returned a message source."""

    NOT_FOUND = "not_found"
    """Loader returned None or raised FileNotFoundError."""

    ERROR = "error"
    """Loader raised any other exception."""


__all__ = [
    "LoadStatus",
]
