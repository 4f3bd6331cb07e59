import io

import pytest

from solong.formatting import (
    format_hex,
    format_int,
    format_ptr,
    format_str,
    format_uint,
    printf,
    sprintf,
)


def test_format_str_passes_text_through():
    assert format_str("abc") == "abc"


def test_format_str_none():
    assert format_str(None) == "(null)"


@pytest.mark.parametrize("value", [0, 5, -5, 2147483647, -2147483648])
def test_format_int_round_trip(value):
    assert int(format_int(value)) == value


def test_format_int_wraps_to_32_bits():
    assert format_int(1 << 31) == "-2147483648"


def test_format_uint_of_minus_one():
    assert format_uint(-1) == "4294967295"


@pytest.mark.parametrize("value", [0, 9, 10, 4000000000])
def test_format_uint_round_trip(value):
    assert int(format_uint(value)) == value


@pytest.mark.parametrize("value", [0, 15, 16, 255, 3735928559])
def test_format_hex_round_trip(value):
    text = format_hex(value)
    assert int(text, 16) == value
    assert text == text.lower()
    assert format_hex(value, True) == text.upper()


def test_format_hex_pinned():
    assert format_hex(255) == "ff"


def test_format_hex_negative_wraps():
    assert int(format_hex(-1), 16) == int(format_uint(-1))


def test_format_ptr_null():
    assert format_ptr(None) == "(nil)"
    assert format_ptr(0) == "(nil)"


@pytest.mark.parametrize("address", [1, 0x7FFE1234, 0x55AA00FF00])
def test_format_ptr_round_trip(address):
    text = format_ptr(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_format_rejects_non_int():
    with pytest.raises(TypeError):
        format_int("3")


def test_sprintf_plain_text():
    assert sprintf("no conversions") == "no conversions"


def test_sprintf_percent_literal():
    assert sprintf("100%%") == "100%"


def test_sprintf_matches_pieces():
    out = sprintf("%s=%d [%x|%X] %u %c %p", "n", -7, 3054, 3054, 12, "z", 0)
    expected = " ".join(
        [
            "n=" + format_int(-7),
            "[" + format_hex(3054) + "|" + format_hex(3054, True) + "]",
            format_uint(12),
            "z",
            format_ptr(0),
        ]
    )
    assert out == expected


def test_sprintf_char_from_int():
    assert sprintf("%c", ord("Q")) == "Q"


def test_sprintf_null_string():
    assert sprintf("[%s]", None) == "[" + format_str(None) + "]"


def test_sprintf_i_same_as_d():
    assert sprintf("%i", -99) == sprintf("%d", -99)


def test_sprintf_unknown_conversion():
    with pytest.raises(ValueError):
        sprintf("%q", 1)


def test_sprintf_lone_percent():
    with pytest.raises(ValueError):
        sprintf("oops %")


def test_sprintf_missing_argument():
    with pytest.raises(ValueError):
        sprintf("%d %d", 1)


def test_sprintf_rejects_none_format():
    with pytest.raises(TypeError):
        sprintf(None)


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("%s-%d", "ab", 12, stream=buf)
    assert buf.getvalue() == sprintf("%s-%d", "ab", 12)
    assert count == len(buf.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("%u", 8)
    out = capsys.readouterr().out
    assert out == format_uint(8)
    assert count == len(out)