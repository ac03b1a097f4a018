import math
from typing import Optional

from monetary.app.ports.outbound.currency_registry import CurrencyRegistry
from monetary.domain.exceptions import InvalidAmountError, InvalidCurrencyError
from monetary.domain.rounding import RoundingPolicy, round_amount
from monetary.domain.values import Currency, Money, RoundingMode
from monetary.shared.logging import get_logger

logger = get_logger(__name__)


class MoneyFactory:
    def __init__(
        self,
        registry: CurrencyRegistry,
        rounding_policy: Optional[RoundingPolicy] = None,
        default_mode: RoundingMode = RoundingMode.HALF_UP,
    ):
        self._registry = registry
        self._rounding = rounding_policy or RoundingPolicy()
        self._default_mode = default_mode

    @property
    def default_mode(self) -> RoundingMode:
        return self._default_mode

    def currency(self, code: str) -> Currency:
        """
        Look a currency up by code (case-insensitive).

        :raises InvalidCurrencyError: if the registry does not know the code
        """
        normalized = code.upper() if isinstance(code, str) else code
        currency = self._registry.lookup(normalized)

        if currency is None:
            logger.debug("currency_lookup_failed", code=code)
            raise InvalidCurrencyError(code)

        return currency

    def from_decimal(
        self,
        amount: float,
        currency_code: str,
        mode: Optional[RoundingMode] = None,
    ) -> Money:
        """
        Create Money from a decimal amount, rounding it to the currency's scale.

        :param amount: Decimal amount in major units (e.g. 12.34 dollars)
        :param currency_code: Currency code, any case
        :param mode: Rounding mode (default: the factory's default mode)

        :raises InvalidAmountError: if amount is NaN or infinite
        :raises InvalidCurrencyError: if the currency is unknown
        :raises InvalidRoundingModeError: for unknown modes under a strict policy
        """
        if not math.isfinite(amount):
            raise InvalidAmountError(amount)

        currency = self.currency(currency_code)
        resolved = self._rounding.resolve(self._default_mode if mode is None else mode)

        units = round_amount(amount, currency.scale, resolved)

        return Money(amount=units, currency_code=currency.code, scale=currency.scale)

    def from_smallest_unit(self, units: int, currency_code: str) -> Money:
        """
        Wrap an integer amount of smallest units (e.g. cents) without rounding.

        :raises InvalidCurrencyError: if the currency is unknown
        :raises InvalidAmountError: if units is outside the signed 64-bit range
        """
        currency = self.currency(currency_code)

        return Money(amount=units, currency_code=currency.code, scale=currency.scale)

    def multiply(
        self, money: Money, factor: float, mode: Optional[RoundingMode] = None
    ) -> Money:
        """
        Multiply money by a factor using this factory's rounding policy
        and default mode.

        :raises InvalidFactorError: if factor is NaN or infinite
        :raises InvalidRoundingModeError: for unknown modes under a strict policy
        """
        return money.multiply(
            factor,
            self._default_mode if mode is None else mode,
            rounding_policy=self._rounding,
        )

    def zero(self, currency_code: str) -> Money:
        return self.from_smallest_unit(0, currency_code)

    def format_default(self, money: Money) -> str:
        """Format money with its currency's default display options."""
        return money.format(self.currency(money.currency_code).default_format)
