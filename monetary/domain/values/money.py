import math
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from monetary.domain.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidDivisorError,
    InvalidFactorError,
    InvalidSplitPartsError,
)
from monetary.domain.rounding import (
    RoundingPolicy,
    round_amount,
    round_half_away_from_zero,
)

from .format_options import FormatOptions
from .rounding_mode import RoundingMode

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Money:
    """
    An amount of money held as an integer count of the currency's smallest unit.

    Instances are normally built through MoneyFactory, which looks the currency
    up in a registry. Every operation returns a new Money; the scale and the
    currency of the operands carry over to the result.
    """

    amount: int
    currency_code: str
    scale: int
    divisor: int = field(init=False)

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"Money amount must be an integer: {self.amount!r}")
        if not INT64_MIN <= self.amount <= INT64_MAX:
            raise InvalidAmountError(self.amount, "outside the signed 64-bit range")
        if self.scale < 0:
            raise ValueError(f"Money scale cannot be negative: {self.scale}")

        object.__setattr__(self, "divisor", 10**self.scale)

    def __str__(self) -> str:
        return self.display_string()

    # Accessors

    def decimal_amount(self) -> float:
        return float(self.amount) / float(self.divisor)

    def smallest_unit(self) -> int:
        return self.amount

    def display_string(self) -> str:
        """Fixed "<amount with scale digits> <code>" rendering, e.g. "1234.56 USD"."""
        return f"{self.decimal_amount():.{self.scale}f} {self.currency_code}"

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    # Arithmetic

    def add(self, other: "Money") -> "Money":
        self._check_same_currency(other)
        return self._with_amount(self.amount + other.amount)

    def subtract(self, other: "Money") -> "Money":
        self._check_same_currency(other)
        return self._with_amount(self.amount - other.amount)

    def multiply(
        self,
        factor: float,
        mode: Optional[RoundingMode] = None,
        rounding_policy: Optional[RoundingPolicy] = None,
    ) -> "Money":
        """
        Multiply by a float factor, rounding the product to whole smallest units.

        :param factor: Finite multiplier
        :param mode: Rounding mode (default: HALF_UP)
        :param rounding_policy: How unknown modes are treated (default: fall back)

        :raises InvalidFactorError: if factor is NaN or infinite
        :raises InvalidRoundingModeError: for unknown modes under a strict policy
        """
        if not math.isfinite(factor):
            raise InvalidFactorError(factor)

        product = float(self.amount) * float(factor)
        if not math.isfinite(product):
            raise InvalidAmountError(product, "product is not finite")

        policy = rounding_policy or RoundingPolicy()
        resolved = policy.resolve(RoundingMode.HALF_UP if mode is None else mode)

        return self._with_amount(round_amount(product, 0, resolved))

    def divide(self, divisor: float) -> "Money":
        """
        Divide by a float, always rounding half away from zero.

        :raises InvalidDivisorError: if divisor is NaN, infinite or zero
        """
        if not math.isfinite(divisor) or divisor == 0:
            raise InvalidDivisorError(divisor)

        quotient = float(self.amount) / float(divisor)
        if not math.isfinite(quotient):
            raise InvalidAmountError(quotient, "quotient is not finite")

        return self._with_amount(round_half_away_from_zero(quotient))

    def split(self, parts: int) -> list["Money"]:
        """
        Split into `parts` amounts whose sum is exactly this amount.

        Division truncates toward zero; the first |remainder| parts carry one
        extra unit in the direction of the sign, so 100 / 3 gives
        [34, 33, 33] and -100 / 3 gives [-34, -33, -33].

        :raises InvalidSplitPartsError: if parts <= 0
        """
        if parts <= 0:
            raise InvalidSplitPartsError(parts)

        sign = -1 if self.amount < 0 else 1
        base, remainder = divmod(abs(self.amount), parts)

        return [
            self._with_amount(sign * (base + 1 if i < remainder else base))
            for i in range(parts)
        ]

    def negate(self) -> "Money":
        return self._with_amount(-self.amount)

    def abs(self) -> "Money":
        return self._with_amount(abs(self.amount))

    def __add__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Money":
        return self.negate()

    def __abs__(self) -> "Money":
        return self.abs()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount >= other.amount

    # Formatting

    def format(self, options: Optional[FormatOptions] = None) -> str:
        """
        Render the amount with the given display options.

        The sign always comes first, even before a leading symbol:
        -123456 USD with "$", ",", ".", symbol first, spaced and with code
        shown renders as "-$ 1,234.56 USD".
        """
        opts = options or FormatOptions()

        sign = "-" if self.amount < 0 else ""
        digits = str(abs(self.amount)).rjust(self.scale + 1, "0")

        int_part = digits[: len(digits) - self.scale]
        frac_part = digits[len(digits) - self.scale :]

        if opts.thousands_separator:
            int_part = _group_thousands(int_part, opts.thousands_separator)

        number = int_part
        if self.scale > 0:
            number += opts.decimal_separator + frac_part

        space = " " if opts.space_between else ""
        code = space + self.currency_code if opts.show_currency_code else ""

        if opts.symbol_first:
            return sign + opts.symbol + space + number + code
        return sign + number + space + opts.symbol + code

    def _with_amount(self, amount: int) -> "Money":
        return replace(self, amount=amount)

    def _check_same_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot combine Money with {type(other).__name__}")
        if self.currency_code != other.currency_code:
            raise CurrencyMismatchError(self.currency_code, other.currency_code)


def _group_thousands(digits: str, separator: str) -> str:
    groups = []
    for end in range(len(digits), 0, -3):
        groups.append(digits[max(0, end - 3) : end])

    return separator.join(reversed(groups))
