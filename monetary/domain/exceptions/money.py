from enum import Enum
from typing import Any

from .base import DomainException


class MoneyErrorKind(Enum):
    """Closed set of failure kinds. Compare these, not messages."""

    INVALID_CURRENCY = "invalid_currency"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_FACTOR = "invalid_factor"
    INVALID_DIVISOR = "invalid_divisor"
    INVALID_SPLIT_PARTS = "invalid_split_parts"
    CURRENCY_MISMATCH = "currency_mismatch"
    PARSE_ERROR = "parse_error"
    INVALID_ROUNDING_MODE = "invalid_rounding_mode"


class MoneyError(DomainException):
    kind: MoneyErrorKind


class InvalidCurrencyError(MoneyError):
    """Raised when a currency code is not present in the registry."""

    kind = MoneyErrorKind.INVALID_CURRENCY

    def __init__(self, code: str):
        self.code = code

        super().__init__(f"Invalid currency: {code!r}")


class InvalidAmountError(MoneyError):
    """Raised for NaN, infinite or out-of-range amounts."""

    kind = MoneyErrorKind.INVALID_AMOUNT

    def __init__(self, amount: Any, reason: str = "amount must be finite"):
        self.amount = amount

        super().__init__(f"Invalid amount {amount!r}: {reason}")


class InvalidFactorError(MoneyError):
    kind = MoneyErrorKind.INVALID_FACTOR

    def __init__(self, factor: float):
        self.factor = factor

        super().__init__(f"Invalid factor: {factor!r}")


class InvalidDivisorError(MoneyError):
    kind = MoneyErrorKind.INVALID_DIVISOR

    def __init__(self, divisor: float):
        self.divisor = divisor

        super().__init__(f"Invalid divisor: {divisor!r}")


class InvalidSplitPartsError(MoneyError):
    kind = MoneyErrorKind.INVALID_SPLIT_PARTS

    def __init__(self, parts: int):
        self.parts = parts

        super().__init__(f"Invalid number of split parts: {parts}")


class CurrencyMismatchError(MoneyError):
    """Raised when two Money values of different currencies are combined."""

    kind = MoneyErrorKind.CURRENCY_MISMATCH

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right

        super().__init__(f"Cannot deal with different currencies: {left} and {right}")


class ParseError(MoneyError):
    """Raised when text does not normalize to a plain decimal literal."""

    kind = MoneyErrorKind.PARSE_ERROR

    def __init__(self, text: str, reason: str = "not a decimal number"):
        self.text = text

        super().__init__(f"Error parsing amount {text!r}: {reason}")


class InvalidRoundingModeError(MoneyError):
    kind = MoneyErrorKind.INVALID_ROUNDING_MODE

    def __init__(self, mode: Any):
        self.mode = mode

        super().__init__(f"Invalid rounding mode: {mode!r}")
