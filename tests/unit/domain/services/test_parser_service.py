import pytest

from monetary.domain.exceptions import (
    InvalidAmountError,
    InvalidCurrencyError,
    MoneyErrorKind,
    ParseError,
)
from monetary.domain.services.parser_service import is_decimal_literal
from monetary.domain.values import Currency, FormatOptions, Money, RoundingMode

USD = Currency(
    code="USD",
    scale=2,
    default_format=FormatOptions(
        symbol="$", decimal_separator=".", thousands_separator=","
    ),
)

EUR = Currency(
    code="EUR",
    scale=2,
    default_format=FormatOptions(
        symbol="€", decimal_separator=",", thousands_separator="."
    ),
)


def test_parse_valid_amount(parser):
    got = parser.parse("$1,234.56", USD, RoundingMode.HALF_UP)

    assert got == Money(amount=123456, currency_code="USD", scale=2)


def test_parse_invalid_format(parser):
    with pytest.raises(ParseError) as exc_info:
        parser.parse("invalid", Currency("USD", 2), RoundingMode.HALF_UP)

    assert exc_info.value.kind is MoneyErrorKind.PARSE_ERROR


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  $1,234.56  ", 123456),
        ("-$1,234.56", -123456),
        ("$ 0.5", 50),
        ("$.5", 50),
        ("1234", 123400),
        ("$1,000,000", 100000000),
    ],
)
def test_parse_us_style(parser, text, expected):
    assert parser.parse(text, USD).amount == expected


def test_parse_european_style(parser):
    assert parser.parse("1.234,56 €", EUR).amount == 123456
    assert parser.parse("-0,01€", EUR).amount == -1


def test_parse_applies_rounding_mode(parser):
    assert parser.parse("$0.125", USD, RoundingMode.HALF_UP).amount == 13
    assert parser.parse("$0.125", USD, RoundingMode.DOWN).amount == 12


@pytest.mark.parametrize(
    "text",
    ["", "   ", "$", "-", "1.2.3", "12a", "1 2", "5.", "--5", "+5", "1e5", "١٢"],
)
def test_parse_rejects_malformed_input(parser, text):
    with pytest.raises(ParseError):
        parser.parse(text, USD)


def test_parse_unknown_currency_surfaces_from_constructor(parser):
    with pytest.raises(InvalidCurrencyError):
        parser.parse("1.00", Currency("XYZ", 2))


def test_parse_overflowing_literal_surfaces_invalid_amount(parser):
    with pytest.raises(InvalidAmountError):
        parser.parse("9" * 400, USD)


def test_normalize_skips_empty_decoration(parser):
    assert parser.normalize(" 12.50 ", Currency("USD", 2)) == "12.50"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", True),
        ("-0.5", True),
        (".5", True),
        ("-.5", True),
        ("123.456", True),
        ("", False),
        ("-", False),
        (".", False),
        ("5.", False),
        ("1.2.3", False),
        ("1,5", False),
        ("²", False),
    ],
)
def test_is_decimal_literal(text, expected):
    assert is_decimal_literal(text) is expected
