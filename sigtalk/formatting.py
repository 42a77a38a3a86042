"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _to_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an int, got {type(value).__name__}"
        )
    return value


def _as_signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_to_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = _to_int(value, "p") & _ULONG_MASK
    if not address:
        return _NULL_POINTER
    return f"0x{address:x}"


def _convert(conversion: Optional[str], args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in ("c", "s", "p", "d", "i", "u", "x", "X"):
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return _string(value)
    if conversion == "p":
        return _pointer(value)
    number = _to_int(value, conversion)
    if conversion in ("d", "i"):
        return str(_as_signed32(number))
    if conversion == "u":
        return str(number & _UINT_MASK)
    return format(number & _UINT_MASK, conversion)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end of ``fmt`` produces nothing.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        pieces.append(_convert(next(chars, None), values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)