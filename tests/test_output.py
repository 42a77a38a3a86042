import io

import pytest

from sigtalk.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("A", buf)
    assert buf.getvalue() == "A"


def test_put_char_rejects_longer_strings():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())
    with pytest.raises(ValueError):
        put_char("", io.StringIO())


def test_put_str_writes_text_unchanged():
    buf = io.StringIO()
    put_str("hello world", buf)
    put_str("", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_rejects_non_string():
    with pytest.raises(TypeError):
        put_str(5, io.StringIO())


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_of_empty_is_newline_only():
    buf = io.StringIO()
    put_endl("", buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize("number", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trips_through_int(number):
    buf = io.StringIO()
    put_nbr(number, buf)
    assert int(buf.getvalue()) == number


def test_put_nbr_negative_has_leading_minus():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())
    with pytest.raises(TypeError):
        put_nbr(1.5, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_char("d")
    put_nbr(-3)
    put_endl("e")
    assert capsys.readouterr().out == "abcd-3e\n"