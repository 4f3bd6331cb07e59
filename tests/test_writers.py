import io

import pytest

from solong.writers import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_string_char():
    buf = io.StringIO()
    assert put_char("x", buf) == 1
    assert buf.getvalue() == "x"


def test_put_char_accepts_byte_value():
    buf = io.StringIO()
    put_char(ord("A"), buf)
    assert buf.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_rejects_other_types():
    with pytest.raises(TypeError):
        put_char(1.5, io.StringIO())


def test_put_str_writes_and_counts():
    buf = io.StringIO()
    assert put_str("hello", buf) == len("hello")
    assert buf.getvalue() == "hello"


def test_put_str_rejects_none():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


def test_put_endl_appends_newline():
    buf = io.StringIO()
    count = put_endl("line", buf)
    assert buf.getvalue() == "line\n"
    assert count == len(buf.getvalue())


@pytest.mark.parametrize("n", [0, 7, 42, -13, 2147483647, -2147483647])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    count = put_nbr(n, buf)
    assert int(buf.getvalue()) == n
    assert count == len(buf.getvalue())


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_char("d")
    assert capsys.readouterr().out == "abcd"