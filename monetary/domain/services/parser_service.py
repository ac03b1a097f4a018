from typing import Optional

from monetary.domain.exceptions import ParseError
from monetary.domain.values import Currency, Money, RoundingMode
from monetary.shared.logging import get_logger

from .factory import MoneyFactory

logger = get_logger(__name__)

_DIGITS = frozenset("0123456789")


def is_decimal_literal(text: str) -> bool:
    """
    Check text against: optional "-", ASCII digits, optional "." followed by
    at least one digit. At least one digit is required overall, so "5",
    "-0.5" and ".5" pass while "", "-", "5." and "1.2.3" do not.
    """
    pos = 1 if text.startswith("-") else 0
    int_digits = 0

    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
        int_digits += 1

    if pos == len(text):
        return int_digits > 0

    if text[pos] != ".":
        return False

    frac_start = pos + 1
    if frac_start == len(text):
        return False

    return all(char in _DIGITS for char in text[frac_start:])


class MoneyParser:
    """Parses decorated amounts like "$1,234.56" or "1.234,56 €"."""

    def __init__(self, money_factory: MoneyFactory):
        self._factory = money_factory

    def normalize(self, text: str, currency: Currency) -> str:
        """
        Strip the currency's symbol and thousands separator and turn its
        decimal separator into ".".
        """
        opts = currency.default_format

        normalized = text.strip()
        if opts.symbol:
            normalized = normalized.replace(opts.symbol, "")
        if opts.thousands_separator:
            normalized = normalized.replace(opts.thousands_separator, "")
        if opts.decimal_separator:
            normalized = normalized.replace(opts.decimal_separator, ".")

        return normalized.strip()

    def parse(
        self, text: str, currency: Currency, mode: Optional[RoundingMode] = None
    ) -> Money:
        """
        Parse a decorated amount string into Money.

        :param text: Input such as "$1,234.56"
        :param currency: Currency whose default format describes the decoration
        :param mode: Rounding mode passed on to the decimal constructor

        :raises ParseError: if the text is not a plain decimal after normalization
        :raises InvalidCurrencyError: if the currency is not in the registry
        :raises InvalidAmountError: if the value overflows to infinity
        """
        normalized = self.normalize(text, currency)

        if not is_decimal_literal(normalized):
            logger.debug("parse_rejected", text=text, normalized=normalized)
            raise ParseError(text)

        try:
            value = float(normalized)
        except ValueError as e:
            raise ParseError(text, str(e)) from e

        return self._factory.from_decimal(value, currency.code, mode)
