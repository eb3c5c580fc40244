"""A small printf supporting the %c %s %p %d %i %u %x %X conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

CONVERSIONS = "cspdiuxX"
_UINT_MASK = 0xFFFFFFFF


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(conversion: str, value: Any) -> str:
    if conversion == "c":
        return value[0] if isinstance(value, str) else chr(int(value) & 0xFF)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        address = 0 if value is None else int(value)
        return "(nil)" if address == 0 else f"0x{address:x}"
    if conversion in "di":
        return str(_as_int32(int(value)))
    unsigned = int(value) & _UINT_MASK
    if conversion == "u":
        return str(unsigned)
    if conversion == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def printf_format(fmt: str | None, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    if fmt is None:
        return ""
    values = iter(args)
    out: list[str] = []
    length = len(fmt)

    def at(pos: int) -> str:
        return fmt[pos] if pos < length else ""

    i = 0
    while i < length:
        nxt = at(i + 1)
        if fmt[i] == "%" and nxt and nxt in CONVERSIONS:
            out.append(_convert(nxt, _next_arg(values)))
            i += 2
        if at(i) == "%" and at(i + 1) == "%":
            i += 1
        if i < length:
            out.append(fmt[i])
            i += 1
    return "".join(out)


def printf(fmt: str | None, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = printf_format(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    stream.flush()
    return len(text)