from core.presets import MAX_PRICE
from core.formatting import (
    format_currency,
    format_currency_short,
    format_delta,
    format_number,
    parse_digits,
    parse_float,
)


def test_format_currency_whole_dollars():
    assert format_currency(4400000) == "$4,400,000"
    assert format_currency(28345.4) == "$28,345"
    assert format_currency(-1200) == "-$1,200"
    assert format_currency(0) == "$0"


def test_format_currency_short():
    assert format_currency_short(4400000) == "$4.4M"
    assert format_currency_short(880000) == "$880K"
    assert format_currency_short(28345) == "$28K"
    assert format_currency_short(999) == "$999"


def test_format_number_groups_digits():
    assert format_number(4400000) == "4,400,000"
    assert format_number(0) == "0"


def test_format_delta_sign():
    assert format_delta(6440) == "+$6,440"
    assert format_delta(-6440) == "-$6,440"
    assert format_delta(0) == "$0"


def test_parse_digits():
    assert parse_digits("$3,400,000") == 3400000
    assert parse_digits("abc") == 0
    assert parse_digits("") == 0
    assert parse_digits(None) == 0
    assert parse_digits("1.5M") == 15


def test_parse_float_is_liberal():
    assert parse_float("8.5") == 8.5
    assert parse_float("8.5%") == 8.5
    assert parse_float("1,000") == 1000.0
    assert parse_float("abc") == 0.0
    assert parse_float("abc", default=3.0) == 3.0
    assert parse_float("inf") == 0.0
    assert parse_float(25) == 25.0


def test_format_currency_short_rounds_half_up():
    assert format_currency_short(1250000) == "$1.3M"
    assert format_currency_short(1000000) == "$1.0M"
    assert format_currency_short(2500) == "$3K"
    assert format_currency_short(1499) == "$1K"


def test_parse_digits_clamps_long_input():
    assert parse_digits("9" * 400) == MAX_PRICE
    assert parse_digits("1" + "0" * 15) == MAX_PRICE
    assert parse_digits("0000012") == 12
