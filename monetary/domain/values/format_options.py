from dataclasses import dataclass


@dataclass(frozen=True)
class FormatOptions:
    """
    Display options for Money.format().
    Every field has a usable default, so FormatOptions() renders "1234.56".
    """

    symbol: str = ""
    decimal_separator: str = "."
    thousands_separator: str = ""
    symbol_first: bool = False
    show_currency_code: bool = False
    space_between: bool = False

    def __post_init__(self) -> None:
        sep = self.decimal_separator
        if sep and sep == self.thousands_separator:
            raise ValueError(f"Decimal and thousands separators must differ: {sep!r}")
