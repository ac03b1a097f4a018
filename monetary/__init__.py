"""Currency-aware fixed-point money: rounding, arithmetic, splitting, parsing."""

from monetary.adapters.outbound.registry import (
    DEFAULT_CURRENCIES,
    InMemoryCurrencyRegistry,
)
from monetary.app.ports.outbound import CurrencyRegistry
from monetary.domain.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidDivisorError,
    InvalidFactorError,
    InvalidRoundingModeError,
    InvalidSplitPartsError,
    MoneyError,
    MoneyErrorKind,
    ParseError,
)
from monetary.domain.rounding import RoundingPolicy, round_amount
from monetary.domain.services import MoneyFactory, MoneyParser
from monetary.domain.values import Currency, FormatOptions, Money, RoundingMode

__version__ = "1.0.0"

__all__ = [
    "Currency",
    "CurrencyRegistry",
    "DEFAULT_CURRENCIES",
    "FormatOptions",
    "InMemoryCurrencyRegistry",
    "Money",
    "MoneyFactory",
    "MoneyParser",
    "RoundingMode",
    "RoundingPolicy",
    "round_amount",
    "MoneyError",
    "MoneyErrorKind",
    "CurrencyMismatchError",
    "InvalidAmountError",
    "InvalidCurrencyError",
    "InvalidDivisorError",
    "InvalidFactorError",
    "InvalidRoundingModeError",
    "InvalidSplitPartsError",
    "ParseError",
]
