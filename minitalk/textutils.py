"""String and number helpers."""

from __future__ import annotations

import itertools
import operator
from typing import List

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = frozenset("0123456789")
_INT_BITS = 32
_LONG_BITS = 64


def _wrap(value: int, bits: int) -> int:
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_integer(text: str) -> int:
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(itertools.takewhile(lambda ch: ch in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and text without digits gives 0. Overflow wraps around.
    """
    return _wrap(_parse_integer(text), _INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value."""
    return _wrap(_parse_integer(text), _LONG_BITS)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    number = operator.index(number)
    if not -(1 << (_INT_BITS - 1)) <= number < (1 << (_INT_BITS - 1)):
        raise OverflowError(f"{number} does not fit in 32 bits")
    return str(number)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def trim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def bounded_find(haystack: str, needle: str, size: int) -> int:
    """Find ``needle`` wholly within the first ``size`` characters.

    Returns the index of the first match, 0 for an empty needle, or -1.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if not needle:
        return 0
    return haystack.find(needle, 0, min(size, len(haystack)))