"""String helpers: integer parsing and formatting, splitting, trimming, searching."""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest
from typing import AnyStr

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits gives 0. Values outside the
    32-bit range wrap around.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = _wrap32(result * 10 + ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap32(result * sign)


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) > 1:
        raise ValueError("sep must be a single character")
    if not sep:
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Index of the first ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or -1 when there is none.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    return haystack[:length].find(needle)


def _codes(text: AnyStr) -> list[int]:
    if isinstance(text, (bytes, bytearray)):
        return list(text)
    return [ord(ch) for ch in text]


def strncmp(a: AnyStr, b: AnyStr, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first pair of differing character codes
    (the shorter string counting as ending in 0), or 0 if none differ.
    """
    pairs = zip_longest(_codes(a), _codes(b), fillvalue=0)
    for ca, cb in islice(pairs, max(n, 0)):
        if ca != cb:
            return ca - cb
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string made of ``func(index, char)`` for each character of ``text``."""
    return "".join(func(i, ch) for i, ch in enumerate(text))