"""Property-file backed message source.

Reads the conventional ``key = value`` property format, always decoded as
UTF-8 (never ISO-8859-1):

- Lines end at "\\n", "\\r" or "\\r\\n" only; "\\f" is whitespace and Unicode
  line separators belong to the text
- Lines whose first non-blank character is "#" or "!" are comments
- The key ends at the first unescaped "=", ":" or whitespace; whitespace
  around the separator is skipped
- A line ending in an odd number of backslashes continues on the next
  line, whose leading whitespace is dropped
- Escapes: \\t \\n \\r \\f \\uXXXX; any other escaped character stands for
  itself (so "\\=", "\\:" and "\\ " can appear in keys)
- When a key appears twice, the last value wins

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from importlib import resources
from pathlib import Path
from typing import Self

from msgbundle import _internal
from msgbundle.constants import PROPERTIES_ENCODING
from msgbundle.source.mapping import MapMessageSource

__all__ = [
    "PropertiesMessageSource",
    "parse_properties",
]

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
# Only these end a line; \f and Unicode separators are ordinary characters
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _logical_lines(text: str) -> list[str]:
    """Join continuation lines and drop blank and comment lines."""
    lines: list[str] = []
    pending: list[str] = []
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if not pending and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending.append(line[:-1])
            continue
        pending.append(line)
        lines.append("".join(pending))
        pending = []
    if pending:
        lines.append("".join(pending))
    return lines


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\" or i + 1 == len(text):
            out.append(char)
            i += 1
            continue
        escaped = text[i + 1]
        if escaped == "u":
            digits = text[i + 2 : i + 6]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                msg = f"Malformed \\uXXXX escape: {text[i : i + 6]!r}"
                raise ValueError(msg)
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_SIMPLE_ESCAPES.get(escaped, escaped))
        i += 2
    return "".join(out)


def _split_pair(line: str) -> tuple[str, str]:
    """Split one logical line into raw (still escaped) key and value."""
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    """Parse property-file text into a key to value dictionary.

    Args:
        text: Decoded property-file content

    Returns:
        Dictionary of unescaped keys and values, in file order

    Raises:
        NullReferenceError: If text is None
        ValueError: If a \\uXXXX escape is malformed

    Example:
        >>> parse_properties("greet = Hello, %s!\\n# comment\\nbye:Bye")
        {'greet': 'Hello, %s!', 'bye': 'Bye'}
    """
    _internal.not_null(text, "cfg.nullText")
    pairs: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_pair(line)
        pairs[_unescape(raw_key)] = _unescape(raw_value)
    return pairs


class PropertiesMessageSource(MapMessageSource):
    """Message source holding the pairs of one property file.

    Example:
        >>> source = PropertiesMessageSource.from_text("greet = Hello, %s!")
        >>> source.get_key("greet")
        'Hello, %s!'
        >>> source = PropertiesMessageSource.from_path("locales/messages_fr.properties")
        >>> source = PropertiesMessageSource.from_resource("myapp", "messages.properties")
    """

    __slots__ = ()

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Build a source from property-file text.

        Raises:
            NullReferenceError: If text is None
            ValueError: If the text holds a malformed escape
        """
        return cls(parse_properties(text))

    @classmethod
    def from_path(cls, path: str | Path) -> Self:
        """Build a source from a file on disk, decoded as UTF-8.

        Args:
            path: Filesystem path to the property file

        Raises:
            NullReferenceError: If path is None
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        _internal.not_null(path, "cfg.nullPath")
        text = Path(path).read_text(encoding=PROPERTIES_ENCODING)
        logger.debug("Loaded property file: %s", path)
        return cls.from_text(text)

    @classmethod
    def from_resource(cls, package: str, resource: str) -> Self:
        """Build a source from a resource shipped inside a Python package.

        Args:
            package: Dotted package name (e.g., "myapp.i18n")
            resource: Resource path relative to the package
                (e.g., "messages_fr.properties")

        Raises:
            NullReferenceError: If package or resource is None
            ModuleNotFoundError: If the package cannot be imported
            FileNotFoundError: If the resource does not exist
            UnicodeDecodeError: If the resource is not valid UTF-8
        """
        _internal.not_null(package, "cfg.nullPackage")
        _internal.not_null(resource, "cfg.nullPath")
        text = resources.files(package).joinpath(resource).read_text(
            encoding=PROPERTIES_ENCODING
        )
        logger.debug("Loaded property resource: %s/%s", package, resource)
        return cls.from_text(text)

    def __repr__(self) -> str:
        return f"PropertiesMessageSource(keys={len(self)})"
