import pytest

from monetary.domain.exceptions import InvalidRoundingModeError
from monetary.domain.values import Currency, FormatOptions, RoundingMode


def test_currency_normalizes_code_to_uppercase():
    c = Currency("usd", 2)

    assert c.code == "USD"
    assert str(c) == "USD"
    assert c.divisor == 100
    assert c.default_format == FormatOptions()


def test_currency_invalid_code():
    with pytest.raises(ValueError):
        Currency("", 2)
    with pytest.raises(ValueError):
        Currency("US1", 2)


def test_currency_negative_scale():
    with pytest.raises(ValueError):
        Currency("USD", -1)


def test_format_options_separators_must_differ():
    with pytest.raises(ValueError):
        FormatOptions(decimal_separator=",", thousands_separator=",")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("half_up", RoundingMode.HALF_UP),
        ("HALF_EVEN", RoundingMode.HALF_EVEN),
        ("half-down", RoundingMode.HALF_DOWN),
        ("HalfEven", RoundingMode.HALF_EVEN),
        (" up ", RoundingMode.UP),
        (RoundingMode.DOWN, RoundingMode.DOWN),
    ],
)
def test_rounding_mode_from_value(value, expected):
    assert RoundingMode.from_value(value) is expected


@pytest.mark.parametrize("value", ["sideways", "", 3, None])
def test_rounding_mode_from_value_rejects_unknown(value):
    with pytest.raises(InvalidRoundingModeError):
        RoundingMode.from_value(value)
