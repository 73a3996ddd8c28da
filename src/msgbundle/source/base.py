"""MessageSource protocol.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from msgbundle.types import MessageKey, MessageTemplate

__all__ = ["MessageSource"]


@runtime_checkable
class MessageSource(Protocol):
    """A key to raw template lookup table for one locale slice.

    Implementations must be immutable once built and must return None,
    never an empty string, for a key they do not define. An empty string
    is a legitimate template.

    This is a Protocol (structural typing) rather than ABC so any object
    with a matching get_key() method can be stacked into a bundle.

    Example:
        >>> class UpperSource:
        ...     def get_key(self, key: str) -> str | None:
        ...         return key.upper() if key.startswith("shout.") else None
    """

    def get_key(self, key: MessageKey) -> MessageTemplate | None:
        """Return the raw template for key, or None if this source lacks it.

        Args:
            key: Message key

        Returns:
            Raw template string, or None
        """
