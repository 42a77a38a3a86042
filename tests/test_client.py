import io
import signal
from types import SimpleNamespace

import pytest

from sigtalk.client import FAILURE_TEXT, SUCCESS_TEXT, Client, main
from sigtalk.protocol import Decoder, TransmissionError
from sigtalk.server import Server


class FakeKill:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def __call__(self, pid, sig):
        self.calls.append((pid, sig))
        if self.fail:
            raise ProcessLookupError(pid)


def _drive(client, kill):
    client.start()
    while client.exit_code is None:
        client.handle_signal(signal.SIGUSR1, None)
    return [sig for _, sig in kill.calls]


def test_start_sends_first_bit_of_message():
    kill = FakeKill()
    client = Client(77, "A", out=io.StringIO(), kill=kill)
    client.start()
    assert kill.calls == [(77, signal.SIGUSR1)]


def test_bits_round_trip_through_decoder():
    kill = FakeKill()
    client = Client(77, "hello", out=io.StringIO(), kill=kill)
    sent = _drive(client, kill)
    decoder = Decoder()
    results = [decoder.feed(1 if sig == signal.SIGUSR2 else 0) for sig in sent]
    assert results[-1] == b"hello"
    assert len(sent) == 8 * (len("hello") + 1)


def test_success_after_terminator_acknowledged():
    out = io.StringIO()
    kill = FakeKill()
    client = Client(77, "x", out=out, kill=kill)
    _drive(client, kill)
    assert client.exit_code == 0
    assert out.getvalue() == SUCCESS_TEXT


def test_server_failure_signal_ends_with_error():
    out = io.StringIO()
    client = Client(77, "x", out=out, kill=FakeKill())
    client.start()
    assert client.handle_signal(signal.SIGUSR2, None) == 1
    assert out.getvalue() == FAILURE_TEXT


def test_failed_send_raises():
    kill = FakeKill(fail=True)
    client = Client(77, "x", out=io.StringIO(), kill=kill)
    with pytest.raises(TransmissionError):
        client.start()
    assert kill.calls[-1] == (77, signal.SIGUSR2)


def test_empty_message_sends_only_terminator():
    kill = FakeKill()
    client = Client(77, "", out=io.StringIO(), kill=kill)
    sent = _drive(client, kill)
    assert sent == [signal.SIGUSR1] * 8


def test_client_and_server_exchange():
    server_out = io.StringIO()
    client_out = io.StringIO()
    holder = {}
    server = Server(
        out=server_out,
        kill=lambda pid, sig: holder["client"].handle_signal(sig, None),
    )
    client = Client(
        4242,
        "ok",
        out=client_out,
        kill=lambda pid, sig: server.handle_signal(sig, SimpleNamespace(si_pid=111)),
    )
    holder["client"] = client
    client.start()
    assert server_out.getvalue() == "ok\n"
    assert client.exit_code == 0
    assert client_out.getvalue() == SUCCESS_TEXT


def test_main_wrong_argument_count(capsys):
    assert main(["1"]) == 1
    assert capsys.readouterr().out == "Invalid arguments.\n"


def test_main_bad_pid(capsys):
    assert main(["abc", "hi"]) == 1
    assert capsys.readouterr().out == "Invalid arguments.\n"