from monetary.domain.values import Currency, FormatOptions

_SEPARATORS = {
    "dot": (".", ","),  # 1,234.56
    "comma": (",", "."),  # 1.234,56
    "space": (",", " "),  # 1 234,56
    "apostrophe": (".", "'"),  # 1'234.56
}


def _currency(
    code: str,
    scale: int,
    symbol: str,
    style: str = "dot",
    symbol_first: bool = True,
    space_between: bool = False,
) -> Currency:
    decimal_separator, thousands_separator = _SEPARATORS[style]

    return Currency(
        code=code,
        scale=scale,
        default_format=FormatOptions(
            symbol=symbol,
            decimal_separator=decimal_separator,
            thousands_separator=thousands_separator,
            symbol_first=symbol_first,
            space_between=space_between,
        ),
    )


# ISO 4217 minor units, with a common display style for each currency.
DEFAULT_CURRENCIES: tuple[Currency, ...] = (
    _currency("USD", 2, "$"),
    _currency("EUR", 2, "€", "comma", symbol_first=False, space_between=True),
    _currency("GBP", 2, "£"),
    _currency("JPY", 0, "¥"),
    _currency("CNY", 2, "¥"),
    _currency("KRW", 0, "₩"),
    _currency("INR", 2, "₹"),
    _currency("CHF", 2, "CHF", "apostrophe", space_between=True),
    _currency("CAD", 2, "$"),
    _currency("AUD", 2, "$"),
    _currency("NZD", 2, "$"),
    _currency("MXN", 2, "$"),
    _currency("CLP", 0, "$", "comma"),
    _currency("BRL", 2, "R$", "comma", space_between=True),
    _currency("SEK", 2, "kr", "space", symbol_first=False, space_between=True),
    _currency("NOK", 2, "kr", "space", symbol_first=False, space_between=True),
    _currency("DKK", 2, "kr.", "comma", symbol_first=False, space_between=True),
    _currency("PLN", 2, "zł", "space", symbol_first=False, space_between=True),
    _currency("ZAR", 2, "R", "space", space_between=True),
    _currency("KWD", 3, "KD", space_between=True),
    _currency("BHD", 3, "BD", space_between=True),
    _currency("OMR", 3, "OMR", space_between=True),
)
