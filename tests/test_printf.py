import io

import pytest

from ftkit.printf import printf, sprintf


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_percent_escape():
    assert sprintf("100%%") == "100%"


def test_char_from_str_and_int():
    assert sprintf("%c", "a") == "a"
    assert sprintf("%c", ord("Z")) == "Z"


def test_string_and_null_string():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


def test_signed_decimal_round_trip():
    for n in (0, 7, -7, 123456, -2147483648, 2147483647):
        assert int(sprintf("%d", n)) == n
        assert sprintf("%i", n) == sprintf("%d", n)


def test_signed_wraps_to_32_bits():
    assert sprintf("%d", 2147483648) == "-2147483648"


def test_unsigned_wraps_negative_values():
    assert int(sprintf("%u", -1)) == (1 << 32) - 1
    assert sprintf("%u", 42) == "42"


def test_hex_round_trip_and_case():
    for n in (0, 1, 15, 16, 255, 4096, 0xDEADBEEF):
        lower = sprintf("%x", n)
        upper = sprintf("%X", n)
        assert int(lower, 16) == n
        assert upper == lower.upper()
        assert lower == lower.lower()


def test_pointer_null_and_prefix():
    assert sprintf("%p", 0) == "(nil)"
    assert sprintf("%p", None) == "(nil)"
    text = sprintf("%p", 0x1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234


def test_mixed_format_matches_pieces():
    result = sprintf("%s=%d (%c)", "x", 5, "y")
    assert result == "x=" + sprintf("%d", 5) + " (y)"


def test_extra_arguments_ignored():
    assert sprintf("%d", 1, 2, 3) == "1"


def test_printf_writes_and_returns_length():
    stream = io.StringIO()
    count = printf("%s-%d-%x%%", "ab", -12, 255, stream=stream)
    written = stream.getvalue()
    assert written == sprintf("%s-%d-%x%%", "ab", -12, 255)
    assert count == len(written)


def test_printf_null_string_length():
    stream = io.StringIO()
    count = printf("%s", None, stream=stream)
    assert stream.getvalue() == "(null)"
    assert count == 6


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "out")
    assert capsys.readouterr().out == "out"
    assert count == 3


def test_unknown_conversion_raises():
    with pytest.raises(ValueError):
        sprintf("%q", 1)


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_argument_types_raise():
    with pytest.raises(TypeError):
        sprintf("%s", 5)
    with pytest.raises(TypeError):
        sprintf("%d", "5")
    with pytest.raises(TypeError):
        sprintf("%c", "ab")


def test_printf_writes_nothing_on_error():
    stream = io.StringIO()
    with pytest.raises(ValueError):
        printf("ok %q", 1, stream=stream)
    assert stream.getvalue() == ""