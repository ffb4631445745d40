import pytest

from tillpoint.formatting import format_number, parse_int, parse_number


def test_format_integer_unchanged():
    assert format_number(7) == "7"


def test_format_whole_float_has_no_decimal_point():
    assert format_number(250.0) == "250"


def test_format_fraction_kept():
    assert format_number(12.5) == "12.5"


def test_format_large_value_uses_exponent():
    assert format_number(1000000.0) == "1e+06"


def test_format_rounds_to_six_significant_digits():
    assert format_number(0.1 + 0.2) == "0.3"


@pytest.mark.parametrize("value", [0.0, 1.5, 99.99, 120.0, 0.25, -3.75])
def test_format_parse_round_trip(value):
    assert parse_number(format_number(value)) == value


def test_parse_number_ignores_whitespace():
    assert parse_number("  12.5 \t") == 12.5


@pytest.mark.parametrize("text", ["", "   ", "abc", "1_000", "12.5x", "1,5", "--1"])
def test_parse_number_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_number(text)


def test_parse_number_rejects_overflow():
    with pytest.raises(ValueError):
        parse_number("1e999")


def test_parse_number_accepts_exponent():
    assert parse_number("2.5e2") == 250.0


def test_parse_int_basic():
    assert parse_int(" 42 ") == 42
    assert parse_int("-3") == -3


@pytest.mark.parametrize("text", ["", "4.2", "abc", "1_0", "2147483648", "-2147483649"])
def test_parse_int_rejects(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_int_accepts_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648