import io

import pytest

from minixpm.output import put_char, put_endl, put_number, put_str


def test_put_char_writes_one_character():
    buffer = io.StringIO()
    put_char("x", buffer)
    put_char("y", buffer)
    assert buffer.getvalue() == "xy"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_writes_text_unchanged():
    buffer = io.StringIO()
    put_str("hello world", buffer)
    assert buffer.getvalue() == "hello world"


def test_put_endl_appends_newline():
    buffer = io.StringIO()
    put_endl("line", buffer)
    assert buffer.getvalue() == "line\n"


def test_put_number_smallest_int():
    buffer = io.StringIO()
    put_number(-2147483648, buffer)
    assert buffer.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 10, -1, -42, 2147483647, 123456789])
def test_put_number_round_trip(n):
    buffer = io.StringIO()
    put_number(n, buffer)
    assert int(buffer.getvalue()) == n


def test_defaults_to_stdout(capsys):
    put_str("abc")
    put_endl("")
    assert capsys.readouterr().out == "abc\n"