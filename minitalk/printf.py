"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Dict, Iterator

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def _signed32(value: Any) -> int:
    number = operator.index(value) & _UINT_MASK
    return number - (1 << 32) if number >= 1 << 31 else number


def _unsigned32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c takes a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: str(_signed32(value)),
    "i": lambda value: str(_signed32(value)),
    "u": lambda value: str(_unsigned32(value)),
    "x": lambda value: f"{_unsigned32(value):x}",
    "X": lambda value: f"{_unsigned32(value):X}",
}


def _convert(conversion: str, values: Iterator[Any]) -> str:
    handler = _CONVERSIONS.get(conversion)
    if handler is None:
        # "%%" gives "%", and an unknown conversion prints itself.
        return conversion
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    return handler(value)


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``fmt`` produces with ``args``."""
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format ends with a lone '%'")
        pieces.append(_convert(conversion, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)