from types import MappingProxyType
from typing import Iterable, Optional

from monetary.app.ports.outbound.currency_registry import CurrencyRegistry
from monetary.domain.values import Currency
from monetary.shared.logging import get_logger

from .currencies import DEFAULT_CURRENCIES

logger = get_logger(__name__)


class InMemoryCurrencyRegistry(CurrencyRegistry):
    """
    Currency registry backed by a read-only mapping.
    The table is copied once on construction, so a built registry
    can be shared between threads without locking.
    """

    def __init__(self, currencies: Iterable[Currency] = DEFAULT_CURRENCIES):
        table: dict[str, Currency] = {}

        for currency in currencies:
            if currency.code in table:
                raise ValueError(f"Duplicate currency code: {currency.code}")
            table[currency.code] = currency

        self._currencies = MappingProxyType(table)

        logger.debug("currency_registry_built", currencies=len(table))

    def lookup(self, code: str) -> Optional[Currency]:
        return self._currencies.get(code.upper())

    def codes(self) -> list[str]:
        return sorted(self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)
