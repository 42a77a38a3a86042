"""String helpers: number conversion, searching, comparing, copying, slicing."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, TypeVar

T = TypeVar("T")

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional sign, then as many
    ASCII digits as follow. Anything after them is ignored; with no digits
    the result is 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def itoa(number: int) -> str:
    """Return the decimal form of ``number``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == _NUL else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first
    ``length`` characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the codes of the first differing pair, a
    shorter string counting as ending in NUL, or 0 when they match.
    """
    _check_non_negative("count", count)
    for a, b in zip_longest(first[:count], second[:count], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``; the copy was
    truncated when that length is ``size`` or more.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length that was tried for. When
    ``dest`` already fills the buffer it is returned unchanged together
    with ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not isinstance(charset, str):
        raise TypeError(f"expected a string charset, got {type(charset).__name__}")
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    if not callable(func):
        raise TypeError("func must be callable")
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace every item of ``chars`` in place with ``func(index, item)``."""
    if not callable(func):
        raise TypeError("func must be callable")
    chars[:] = [func(index, char) for index, char in enumerate(chars)]