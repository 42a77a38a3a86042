"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    put_str(text, stream)
    _target(stream).write("\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of ``number`` to ``stream``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    _target(stream).write(str(number))