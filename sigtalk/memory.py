"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(count: int, *buffers: BytesLike) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (low byte kept)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def memcpy(dest: bytearray, src: BytesLike, count: int) -> bytearray:
    """Copy ``count`` bytes from the start of ``src`` to the start of ``dest``."""
    if count == 0 or dest is src:
        return dest
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the result is as if the source bytes were
    copied out first.
    """
    if count < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dest, src) + count > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def memchr(data: BytesLike, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first
    ``count`` bytes, or None when there is none."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns the difference between the first pair of unequal bytes, or 0
    when they all match.
    """
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0