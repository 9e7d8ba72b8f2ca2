import io

import pytest

from labutil.fmt import format_message, fprintf


def test_plain_text_passes_through():
    assert format_message("hello world\n") == "hello world\n"


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2**31 - 1, -(2**31)])
def test_decimal(n):
    assert format_message("%d", n) == str(n)


def test_decimal_wraps_to_32_bits():
    assert format_message("%d", 2**31) == str(-(2**31))


def test_unsigned_long():
    assert format_message("%l", 2**63) == str(2**63)


@pytest.mark.parametrize("n", [0, 9, 10, 255, 4096, 0x7FFFFFFF])
def test_hex_uppercase(n):
    assert format_message("%x", n) == format(n, "X")


def test_hex_of_negative_is_unsigned():
    assert format_message("%x", -1) == "FFFFFFFF"


def test_pointer_is_sixteen_digits():
    assert format_message("%p", 0) == "0x" + "0" * 16
    assert format_message("%p", 0xABC) == "0x" + format(0xABC, "016X")


def test_string_and_null():
    assert format_message("%s!", "hi") == "hi!"
    assert format_message("%s", None) == "(null)"


def test_char_from_int_and_str():
    assert format_message("%c%c", ord("A"), "b") == "Ab"


def test_percent_and_unknown():
    assert format_message("100%%") == "100%"
    assert format_message("%q") == "%q"


def test_trailing_percent_is_dropped():
    assert format_message("abc%") == "abc"


def test_mixed():
    assert format_message("%s %d %d %s\n", "wc", 3, 4, "f") == "wc 3 4 f\n"


def test_missing_argument():
    with pytest.raises(ValueError):
        format_message("%d %d", 1)


def test_fprintf_writes_to_stream():
    stream = io.StringIO()
    fprintf(stream, "%s: %d\n", "count", 7)
    assert stream.getvalue() == format_message("%s: %d\n", "count", 7)