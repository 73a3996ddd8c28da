"""Mapping-backed message source.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Self

from msgbundle import _internal
from msgbundle.types import MessageKey, MessageTemplate

__all__ = ["MapMessageSource"]

logger = logging.getLogger(__name__)


class MapMessageSource:
    """In-memory message source backed by a read-only copy of a mapping.

    Build it directly from a mapping, or incrementally with a Builder:

    Example:
        >>> source = MapMessageSource({"greet": "Hello, %s!"})
        >>> source.get_key("greet")
        'Hello, %s!'
        >>> source.get_key("missing") is None
        True
        >>> source = (
        ...     MapMessageSource.builder()
        ...     .put("a", "first")
        ...     .put_all({"b": "second"})
        ...     .build()
        ... )
        >>> len(source)
        2
    """

    __slots__ = ("_messages",)

    def __init__(self, messages: Mapping[MessageKey, MessageTemplate]) -> None:
        """Copy messages into a new source.

        Args:
            messages: Key to template mapping

        Raises:
            NullReferenceError: If messages is None, or contains a None key
                or a None value
        """
        _internal.not_null(messages, "cfg.nullSource")
        copied: dict[MessageKey, MessageTemplate] = {}
        for key, value in messages.items():
            _internal.not_null(key, "cfg.map.nullKey")
            copied[key] = _internal.not_null(value, "cfg.map.nullValue", key)
        self._messages: Mapping[MessageKey, MessageTemplate] = MappingProxyType(copied)

    @classmethod
    def builder(cls) -> MapMessageSource.Builder:
        """Create a new, empty builder."""
        return cls.Builder()

    @classmethod
    def from_mapping(cls, messages: Mapping[MessageKey, MessageTemplate]) -> Self:
        """Alias of the constructor, for symmetry with the other sources."""
        return cls(messages)

    def get_key(self, key: MessageKey) -> MessageTemplate | None:
        """Return the template for key, or None."""
        return self._messages.get(key)

    @property
    def messages(self) -> Mapping[MessageKey, MessageTemplate]:
        """Read-only view of the key to template mapping."""
        return self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"MapMessageSource(keys={len(self._messages)})"

    class Builder:
        """Mutable accumulator for a MapMessageSource. Not thread-safe."""

        __slots__ = ("_messages",)

        def __init__(self) -> None:
            self._messages: dict[MessageKey, MessageTemplate] = {}

        def put(self, key: MessageKey, value: MessageTemplate) -> Self:
            """Add one key, replacing any previous value.

            Raises:
                NullReferenceError: If key or value is None
            """
            _internal.not_null(key, "cfg.map.nullKey")
            self._messages[key] = _internal.not_null(value, "cfg.map.nullValue", key)
            return self

        def put_all(self, messages: Mapping[MessageKey, MessageTemplate]) -> Self:
            """Add every pair of a mapping, replacing previous values.

            Raises:
                NullReferenceError: If messages is None or holds a None key/value
            """
            _internal.not_null(messages, "cfg.nullSource")
            for key, value in messages.items():
                self.put(key, value)
            return self

        def build(self) -> MapMessageSource:
            """Build the source from a copy of the accumulated pairs."""
            logger.debug("Built MapMessageSource with %d keys", len(self._messages))
            return MapMessageSource(self._messages)
