"""The sending side: delivers a message to a server one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
from typing import Any, Callable, Optional, Sequence, TextIO

from .formatting import printf
from .protocol import Bit, Message, Transmission, TransmissionError, parse_pid

SIGNAL_FOR_BIT = {Bit.ZERO: signal.SIGUSR1, Bit.ONE: signal.SIGUSR2}
_WATCHED = frozenset({signal.SIGUSR1, signal.SIGUSR2})

SUCCESS_TEXT = "Signal received:\nServer received message successfuly.\n"
FAILURE_TEXT = "Signal received:\nServer ended unexpectedly.\n"

Kill = Callable[[int, int], Any]


class Client:
    """Send ``message`` to the server ``pid``, waiting for an ack per bit.

    A zero bit is sent as ``SIGUSR1`` and a one bit as ``SIGUSR2``. The
    server answers ``SIGUSR1`` for every bit, or ``SIGUSR2`` when it fails.
    """

    def __init__(
        self,
        pid: int,
        message: Message,
        out: Optional[TextIO] = None,
        kill: Kill = os.kill,
    ) -> None:
        self.pid = pid
        self.out = out
        self.exit_code: Optional[int] = None
        self._kill = kill
        self._transmission = Transmission(message)

    def _stream(self) -> TextIO:
        return sys.stdout if self.out is None else self.out

    def _send(self, bit: Bit) -> None:
        try:
            self._kill(self.pid, SIGNAL_FOR_BIT[bit])
        except OSError as exc:
            try:
                self._kill(self.pid, signal.SIGUSR2)
            except OSError:
                pass
            raise TransmissionError(f"cannot signal process {self.pid}") from exc

    def _finish(self, code: int, text: str) -> int:
        printf("%s", text, file=self._stream())
        self._stream().flush()
        self.exit_code = code
        return code

    def start(self) -> None:
        """Send the first bit."""
        bit = self._transmission.next_bit()
        if bit is not None:
            self._send(bit)

    def handle_signal(self, signum: int, frame: Any) -> Optional[int]:
        """React to the server's answer.

        Returns the exit status once the exchange is over, else None.
        """
        if self.exit_code is not None:
            return self.exit_code
        if signum == signal.SIGUSR1:
            bit = self._transmission.next_bit()
            if bit is None:
                return self._finish(0, SUCCESS_TEXT)
            self._send(bit)
        elif signum == signal.SIGUSR2:
            return self._finish(1, FAILURE_TEXT)
        return None

    def run(self) -> int:
        """Send the whole message and return the exit status."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _WATCHED)
        try:
            self.start()
            while self.exit_code is None:
                signum = signal.sigwait(_WATCHED)
                self.handle_signal(signum, None)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)
        return self.exit_code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Usage: client PID MESSAGE."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("Invalid arguments.\n")
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        printf("Invalid arguments.\n")
        return 1
    try:
        return Client(pid, args[1]).run()
    except TransmissionError:
        printf("Unexpected error.\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())