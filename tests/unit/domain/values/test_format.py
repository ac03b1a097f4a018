from monetary.domain.values import FormatOptions, Money

US_STYLE = FormatOptions(
    symbol="$",
    decimal_separator=".",
    thousands_separator=",",
    symbol_first=True,
    show_currency_code=True,
    space_between=True,
)


def usd(amount: int) -> Money:
    return Money(amount=amount, currency_code="USD", scale=2)


def test_format_standard():
    assert usd(123456).format(US_STYLE) == "$ 1,234.56 USD"


def test_format_negative_puts_sign_before_symbol():
    assert usd(-123456).format(US_STYLE) == "-$ 1,234.56 USD"


def test_format_sub_unit_amounts_keep_integer_digit():
    assert usd(5).format() == "0.05"
    assert usd(-5).format() == "-0.05"
    assert usd(0).format() == "0.00"
    assert Money(amount=7, currency_code="KWD", scale=3).format() == "0.007"


def test_format_defaults_have_no_grouping_or_symbol():
    assert usd(123456789).format() == "1234567.89"


def test_format_grouping():
    opts = FormatOptions(thousands_separator=",")

    assert usd(100).format(opts) == "1.00"
    assert usd(100000).format(opts) == "1,000.00"
    assert usd(123456789).format(opts) == "1,234,567.89"
    assert usd(-100000000).format(opts) == "-1,000,000.00"


def test_format_scale_zero_has_no_separator():
    yen = Money(amount=1234567, currency_code="JPY", scale=0)
    opts = FormatOptions(symbol="¥", thousands_separator=",", symbol_first=True)

    assert yen.format(opts) == "¥1,234,567"


def test_format_symbol_after_amount():
    eur = Money(amount=-123456, currency_code="EUR", scale=2)
    opts = FormatOptions(
        symbol="€",
        decimal_separator=",",
        thousands_separator=".",
        space_between=True,
    )

    assert eur.format(opts) == "-1.234,56 €"


def test_format_currency_code_spacing_follows_space_between():
    opts = FormatOptions(symbol="$", symbol_first=True, show_currency_code=True)

    assert usd(150).format(opts) == "$1.50USD"
