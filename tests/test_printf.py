import io

import pytest

from ftkit.printf import printf, sprintf


def test_plain_text_passes_through():
    text = "no conversions here\n"
    assert sprintf(text) == text


def test_char_from_string_and_int():
    assert sprintf("%c", "A") == "A"
    assert sprintf("%c", 65) == chr(65)


def test_string_conversion():
    word = "world"
    assert sprintf("hello %s", word) == "hello " + word


def test_null_string():
    assert sprintf("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 1, -1, 42, 2147483647, -2147483647])
def test_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n
    assert sprintf("%i", n) == sprintf("%d", n)


def test_decimal_minimum():
    assert sprintf("%d", -2147483648) == "-2147483648"


def test_decimal_out_of_range():
    with pytest.raises(OverflowError):
        sprintf("%d", 2147483648)


@pytest.mark.parametrize("n", [0, 7, 4294967295])
def test_unsigned_round_trip(n):
    assert int(sprintf("%u", n)) == n


def test_unsigned_rejects_negative():
    with pytest.raises(OverflowError):
        sprintf("%u", -1)


@pytest.mark.parametrize("n", [1, 255, 48879, 4294967295])
def test_hex_round_trip_and_case(n):
    lower = sprintf("%x", n)
    upper = sprintf("%X", n)
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert upper.lower() == lower


def test_hex_zero():
    assert sprintf("%x", 0) == "0"
    assert sprintf("%X", 0) == "0"


def test_hex_rejects_negative():
    with pytest.raises(OverflowError):
        sprintf("%x", -5)


def test_null_pointer():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_address():
    out = sprintf("%p", 4096)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 4096


def test_percent_does_not_consume_argument():
    out = sprintf("%%%d", 7)
    assert out[0] == "%"
    assert int(out[1:]) == 7


def test_unknown_conversion_is_dropped():
    assert sprintf("a%qb") == "a" + "b"


def test_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_arguments_in_order():
    out = sprintf("%s=%d", "x", 3)
    name, value = out.split("=")
    assert name == "x"
    assert int(value) == 3


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s:%u", "n", 12, stream=stream)
    written = stream.getvalue()
    assert written == sprintf("%s:%u", "n", 12)
    assert count == len(written)


def test_printf_null_string_counts_six():
    stream = io.StringIO()
    assert printf("%s", None, stream=stream) == len("(null)")


def test_printf_defaults_to_stdout(capsys):
    count = printf("%c%c", "o", "k")
    captured = capsys.readouterr().out
    assert captured == "o" + "k"
    assert count == len(captured)