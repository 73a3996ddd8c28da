"""Message template interpolation.

Two interpolation styles are supported:

printf style (interpolate):
    Conversions s r a d i o u x X e E f F g G c, flags "-#0 +", width and
    precision, exactly as Python's % operator renders them. Additionally:
    - "%%" is a literal percent sign
    - "%n" is a newline
    - "%2$s" takes argument 2 (1-based) explicitly, so a translation can
      reorder arguments; explicit and sequential specifiers may be mixed,
      sequential ones count independently of explicit ones

    Arguments must fit the template: a malformed specifier, a missing
    argument, an argument no specifier consumes, or a value the conversion
    cannot render all raise MessageFormatError. Integer conversions take only
    int (never float, Decimal or bool); output is never truncated.

brace style (format_braces):
    str.format() positional fields: "{0}", "{1:>5}".

Formatting is locale-agnostic: no grouping separators, ASCII digits.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal

from msgbundle.errors import MessageFormatError

__all__ = [
    "format_braces",
    "interpolate",
]

_SPECIFIER = re.compile(
    r"%"
    r"(?:(?P<index>[1-9][0-9]*)\$)?"
    r"(?P<flags>[-#0 +]*)"
    r"(?P<width>[0-9]+)?"
    r"(?:\.(?P<precision>[0-9]+))?"
    r"(?P<conversion>[sradiouxXeEfFgGc%n])"
)


_INTEGER_CONVERSIONS = frozenset("diouxX")
_FLOAT_CONVERSIONS = frozenset("eEfFgG")


def _accepts(conversion: str, value: object) -> bool:
    """Check that value fits conversion without lossy coercion."""
    # bool is an int subclass, but never a number in a message
    if isinstance(value, bool):
        return conversion in "sra"
    if conversion in _INTEGER_CONVERSIONS:
        return isinstance(value, int)
    if conversion in _FLOAT_CONVERSIONS:
        return isinstance(value, (int, float, Decimal))
    if conversion == "c":
        return isinstance(value, int) or (isinstance(value, str) and len(value) == 1)
    return True


def _render(
    spec: str, conversion: str, value: object, template: str, key: str | None
) -> str:
    if not _accepts(conversion, value):
        msg = f"Cannot format {type(value).__name__} with '{spec}'"
        raise MessageFormatError(msg, template=template, key=key)
    try:
        return spec % (value,)
    except (TypeError, ValueError, OverflowError) as e:
        msg = f"Cannot format {type(value).__name__} with '{spec}': {e}"
        raise MessageFormatError(msg, template=template, key=key) from e


def interpolate(
    template: str,
    args: Sequence[object] = (),
    *,
    key: str | None = None,
) -> str:
    """Substitute printf-style placeholders in a template.

    Args:
        template: Raw message template
        args: Positional arguments
        key: Message key, only used to enrich error messages

    Returns:
        The formatted string

    Raises:
        MessageFormatError: If the template and arguments do not match

    Example:
        >>> interpolate("Hello, %s!", ["World"])
        'Hello, World!'
        >>> interpolate("%2$s before %1$s", ["a", "b"])
        'b before a'
        >>> interpolate("%05.1f%%", [3.14159])
        '003.1%'
    """
    pieces: list[str] = []
    consumed: set[int] = set()
    next_sequential = 0
    pos = 0

    while True:
        percent = template.find("%", pos)
        if percent < 0:
            pieces.append(template[pos:])
            break
        pieces.append(template[pos:percent])

        match = _SPECIFIER.match(template, percent)
        if match is None:
            msg = f"Invalid format specifier at position {percent}"
            raise MessageFormatError(msg, template=template, key=key)
        pos = match.end()

        conversion = match["conversion"]
        if conversion in "%n":
            if match["index"] or match["flags"] or match["width"] or match["precision"]:
                msg = f"'%{conversion}' does not take an index, flags, width or precision"
                raise MessageFormatError(msg, template=template, key=key)
            pieces.append("%" if conversion == "%" else "\n")
            continue

        if match["index"] is not None:
            index = int(match["index"]) - 1
        else:
            index = next_sequential
            next_sequential += 1

        if index >= len(args):
            msg = (
                f"Specifier '{match.group()}' needs argument {index + 1}, "
                f"but only {len(args)} given"
            )
            raise MessageFormatError(msg, template=template, key=key)

        consumed.add(index)
        # Rebuild the specifier without the explicit index for the % operator
        spec = "%{}{}{}{}".format(
            match["flags"],
            match["width"] or "",
            f".{match['precision']}" if match["precision"] is not None else "",
            conversion,
        )
        pieces.append(_render(spec, conversion, args[index], template, key))

    unused = [i + 1 for i in range(len(args)) if i not in consumed]
    if unused:
        msg = f"Arguments not used by template: {unused}"
        raise MessageFormatError(msg, template=template, key=key)

    return "".join(pieces)


def format_braces(
    template: str,
    args: Sequence[object] = (),
    *,
    key: str | None = None,
) -> str:
    """Substitute str.format()-style positional fields in a template.

    Unlike interpolate(), extra arguments are allowed (str.format semantics).

    Args:
        template: Raw message template using "{0}", "{1}" fields
        args: Positional arguments
        key: Message key, only used to enrich error messages

    Returns:
        The formatted string

    Raises:
        MessageFormatError: If a field refers to a missing argument, uses a
            keyword name, or has an invalid format spec

    Example:
        >>> format_braces("{1}, {0}!", ["World", "Hello"])
        'Hello, World!'
    """
    try:
        return template.format(*args)
    except (IndexError, KeyError, ValueError, TypeError, AttributeError) as e:
        msg = f"Cannot format template: {type(e).__name__}: {e}"
        raise MessageFormatError(msg, template=template, key=key) from e
