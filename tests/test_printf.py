import io

import pytest

from sigtalk.printf import format_message, printf


def test_null_string_and_pointer():
    assert format_message("%s", None) == "(null)"
    assert format_message("%p", None) == "(nil)"
    assert format_message("%p", 0) == "(nil)"


@pytest.mark.parametrize("value", [1, 255, 0xDEADBEEF, 2**48 + 7])
def test_pointer_round_trip(value):
    out = format_message("%p", value)
    assert out.startswith("0x")
    assert int(out[2:], 16) == value


@pytest.mark.parametrize("value", [0, 7, -7, 2147483647, -2147483648])
def test_decimal_round_trip(value):
    assert format_message("%d", value) == str(value)
    assert format_message("%i", value) == str(value)


def test_decimal_wraps_to_32_bits():
    assert format_message("%d", 2**31) == str(-(2**31))
    assert format_message("%u", -1) == str(2**32 - 1)


@pytest.mark.parametrize("value", [0, 10, 255, 0xCAFE])
def test_hex_round_trip(value):
    lower = format_message("%x", value)
    upper = format_message("%X", value)
    assert int(lower, 16) == value
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_char_and_percent():
    assert format_message("%c", ord("A")) == "A"
    assert format_message("%c", "z") == "z"
    assert format_message("100%%") == "100%"
    assert format_message("%c", 0) == "\0"


def test_mixed_format():
    assert format_message("PID : %d\n\n", 1234) == "PID : 1234\n\n"
    assert format_message("%s-%s", "a", "b") == "a-b"


def test_unknown_conversion_is_literal():
    assert format_message("%q") == "%q"


def test_trailing_percent_is_dropped():
    assert format_message("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_message("%d and %d", 1)


def test_printf_text_stream_count():
    stream = io.StringIO()
    count = printf("%s=%d", "x", 5, stream=stream)
    assert stream.getvalue() == "x=5"
    assert count == len(stream.getvalue())


def test_printf_binary_stream_raw_bytes():
    stream = io.BytesIO()
    count = printf("%c%c", 0xE9, 0x00, stream=stream)
    assert stream.getvalue() == bytes([0xE9, 0x00])
    assert count == len(stream.getvalue())