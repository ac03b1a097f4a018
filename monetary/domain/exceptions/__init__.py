from .base import DomainException
from .money import (
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

__all__ = [
    "DomainException",
    "MoneyError",
    "MoneyErrorKind",
    "InvalidCurrencyError",
    "InvalidAmountError",
    "InvalidFactorError",
    "InvalidDivisorError",
    "InvalidSplitPartsError",
    "CurrencyMismatchError",
    "ParseError",
    "InvalidRoundingModeError",
]
