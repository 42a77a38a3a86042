"""The receiving side: rebuilds messages from SIGUSR1/SIGUSR2 bits and prints them."""

from __future__ import annotations

import os
import signal
import sys
from typing import Any, Callable, Optional, Sequence, TextIO

from .formatting import format_printf, printf
from .protocol import Bit, Decoder, TransmissionError

_BIT_FOR_SIGNAL = {signal.SIGUSR1: Bit.ZERO, signal.SIGUSR2: Bit.ONE}
_WATCHED = frozenset(_BIT_FOR_SIGNAL)

Kill = Callable[[int, int], Any]


def format_message(message: Optional[bytes]) -> str:
    """Return the line printed for a received message.

    An empty message prints as ``(null)``, as a missing string does.
    """
    text = message.decode("utf-8", errors="replace") if message else None
    return format_printf("%s\n", text)


class Server:
    """Decode bits sent as signals and acknowledge every one of them.

    ``SIGUSR1`` carries a zero bit and ``SIGUSR2`` a one bit. After each bit
    the sender is sent ``SIGUSR1``; if that fails it is sent ``SIGUSR2`` and
    TransmissionError is raised.
    """

    def __init__(self, out: Optional[TextIO] = None, kill: Kill = os.kill) -> None:
        self.out = out
        self._kill = kill
        self._decoder = Decoder()
        self._sender = 0

    def _stream(self) -> TextIO:
        return sys.stdout if self.out is None else self.out

    def handle_signal(self, signum: int, frame: Any) -> Optional[bytes]:
        """Take one bit and acknowledge it.

        ``frame`` is the signal information when there is any: an object
        whose ``si_pid`` names the sender. Without it the last known sender
        is kept. Returns the message when this bit completed one.
        """
        sender = getattr(frame, "si_pid", 0)
        if sender:
            self._sender = sender
        try:
            bit = _BIT_FOR_SIGNAL[signum]
        except KeyError:
            raise ValueError(f"unexpected signal: {signum}") from None
        message = self._decoder.feed(bit)
        if message is not None:
            stream = self._stream()
            stream.write(format_message(message))
            stream.flush()
        self._acknowledge()
        return message

    def _acknowledge(self) -> None:
        if not self._sender:
            raise TransmissionError("no sender to acknowledge")
        try:
            self._kill(self._sender, signal.SIGUSR1)
        except OSError as exc:
            try:
                self._kill(self._sender, signal.SIGUSR2)
            except OSError:
                pass
            raise TransmissionError(
                f"cannot acknowledge process {self._sender}"
            ) from exc

    def run(self) -> None:
        """Print this process id, then receive messages until an error."""
        printf("PID : %d\n", os.getpid(), file=self._stream())
        self._stream().flush()
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _WATCHED)
        try:
            while True:
                info = signal.sigwaitinfo(_WATCHED)
                self.handle_signal(info.si_signo, info)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server; command-line arguments are ignored."""
    server = Server()
    try:
        server.run()
    except TransmissionError:
        printf("Unexpected error.\n")
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())