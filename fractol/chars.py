"""ASCII character classification and case conversion.

Every function takes either a code point (``int``) or a one-character
``str``. Only the ASCII ranges count: other characters are never letters
or digits, and the case conversions leave them unchanged.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_UPPER_TO_LOWER = ord("a") - ord("A")


def _code(c: Char) -> int:
    if isinstance(c, str):
        return ord(c)
    return int(c)


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    if _is_upper(code):
        return _same_kind(c, code + _UPPER_TO_LOWER)
    return c


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    if _is_lower(code):
        return _same_kind(c, code - _UPPER_TO_LOWER)
    return c