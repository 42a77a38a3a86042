"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2,
with small string, byte, list, formatting and line-reading helpers."""

__version__ = "0.1.0"