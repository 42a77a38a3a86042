"""Character classification and case conversion for single characters.

Every function accepts either an integer character code or a one-character
string. Classification functions return a bool. Case conversions return a
value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_DIGITS = range(ord("0"), ord("9") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(value: CharLike) -> int:
    """Return the integer code for an int or a one-character string."""
    if isinstance(value, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    raise TypeError(
        f"expected an int or a one-character string, got {type(value).__name__}"
    )


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(code: CharLike) -> bool:
    """True for ASCII letters."""
    c = _code(code)
    return c in _UPPER or c in _LOWER


def is_digit(code: CharLike) -> bool:
    """True for the ASCII decimal digits."""
    return _code(code) in _DIGITS


def is_alnum(code: CharLike) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: CharLike) -> bool:
    """True for codes 0 to 127 inclusive."""
    return 0 <= _code(code) <= 127


def is_print(code: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 31 < _code(code) < 127


def to_upper(code: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    c = _code(code)
    if c in _LOWER:
        c -= _CASE_OFFSET
    return _same_kind(code, c)


def to_lower(code: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    c = _code(code)
    if c in _UPPER:
        c += _CASE_OFFSET
    return _same_kind(code, c)