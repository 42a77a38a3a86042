"""The bit-by-bit message protocol shared by client and server.

A message is sent as its bytes, most significant bit first, followed by
eight zero bits for the terminating NUL. Every bit is acknowledged by the
receiver before the next one is sent.
"""

from __future__ import annotations

import enum
from typing import Iterator, List, Optional, Union

from .strings import atoi

ANSI_COLOR_RED = "\x1b[31m"
ANSI_COLOR_BLUE = "\x1b[34m"
ANSI_COLOR_GREEN = "\x1b[32m"
ANSI_COLOR_YELLOW = "\x1b[33m"
ANSI_COLOR_RESET = "\x1b[0m"

Message = Union[str, bytes]


class Bit(enum.IntEnum):
    """One transmitted bit."""

    ZERO = 0
    ONE = 1


class TransmissionError(Exception):
    """Raised when a message cannot be delivered or acknowledged."""


def parse_pid(text: str) -> int:
    """Read a process id the way the client reads its first argument.

    Raises ValueError when the text does not give a positive id.
    """
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"invalid process id: {text!r}")
    return pid


def _payload(message: Message) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return data.split(b"\0", 1)[0]


def encode_bits(message: Message) -> Iterator[Bit]:
    """Yield the bits of ``message`` followed by a NUL terminator.

    A message holding a NUL byte is cut short there.
    """
    for byte in _payload(message) + b"\0":
        for shift in range(7, -1, -1):
            yield Bit((byte >> shift) & 1)


class Decoder:
    """Rebuild messages from a stream of bits."""

    def __init__(self) -> None:
        self._byte = 0
        self._bits = 0
        self._message = bytearray()

    def feed(self, bit: Union[Bit, int]) -> Optional[bytes]:
        """Take one bit; return the completed message when its NUL arrives."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._byte = (self._byte << 1) | int(bit)
        self._bits += 1
        if self._bits < 8:
            return None
        byte, self._byte, self._bits = self._byte, 0, 0
        if byte:
            self._message.append(byte)
            return None
        message = bytes(self._message)
        self._message.clear()
        return message


class Transmission:
    """The sending side of one message: hands out its bits one at a time."""

    def __init__(self, message: Message) -> None:
        self._bits: List[Bit] = list(encode_bits(message))
        self._position = 0

    def next_bit(self) -> Optional[Bit]:
        """Return the next bit to send, or None once the terminator is sent."""
        if self._position >= len(self._bits):
            return None
        bit = self._bits[self._position]
        self._position += 1
        return bit