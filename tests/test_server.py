import io
import signal
from types import SimpleNamespace

import pytest

from sigtalk.protocol import Bit, TransmissionError, encode_bits
from sigtalk.server import Server, format_message

SENDER = SimpleNamespace(si_pid=4242)


class FakeKill:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def __call__(self, pid, sig):
        self.calls.append((pid, sig))
        if self.fail:
            raise ProcessLookupError(pid)


def _signal_for(bit):
    return signal.SIGUSR2 if bit == Bit.ONE else signal.SIGUSR1


def _send(server, message):
    results = [server.handle_signal(_signal_for(bit), SENDER) for bit in encode_bits(message)]
    return results


def test_format_message_text():
    assert format_message(b"hello") == "hello\n"


def test_format_message_empty_prints_null():
    assert format_message(b"") == "(null)\n"


def test_message_is_printed_when_terminator_arrives():
    out = io.StringIO()
    server = Server(out=out, kill=FakeKill())
    results = _send(server, "hi")
    assert results[-1] == b"hi"
    assert all(result is None for result in results[:-1])
    assert out.getvalue() == "hi\n"


def test_every_bit_is_acknowledged_to_sender():
    kill = FakeKill()
    server = Server(out=io.StringIO(), kill=kill)
    _send(server, "ab")
    assert len(kill.calls) == 24
    assert set(kill.calls) == {(4242, signal.SIGUSR1)}


def test_consecutive_messages():
    out = io.StringIO()
    server = Server(out=out, kill=FakeKill())
    _send(server, "one")
    _send(server, "two")
    assert out.getvalue() == "one\ntwo\n"


def test_sender_is_remembered_without_info():
    kill = FakeKill()
    server = Server(out=io.StringIO(), kill=kill)
    server.handle_signal(signal.SIGUSR1, SENDER)
    server.handle_signal(signal.SIGUSR2, None)
    assert kill.calls[-1] == (4242, signal.SIGUSR1)


def test_no_sender_raises():
    server = Server(out=io.StringIO(), kill=FakeKill())
    with pytest.raises(TransmissionError):
        server.handle_signal(signal.SIGUSR1, None)


def test_failed_acknowledge_raises_and_signals_failure():
    kill = FakeKill(fail=True)
    server = Server(out=io.StringIO(), kill=kill)
    with pytest.raises(TransmissionError):
        server.handle_signal(signal.SIGUSR1, SENDER)
    assert kill.calls == [(4242, signal.SIGUSR1), (4242, signal.SIGUSR2)]


def test_unexpected_signal_rejected():
    server = Server(out=io.StringIO(), kill=FakeKill())
    with pytest.raises(ValueError):
        server.handle_signal(signal.SIGINT, SENDER)