from abc import ABC, abstractmethod
from typing import Optional

from monetary.domain.values import Currency


class CurrencyRegistry(ABC):
    """
    Read-only source of currency metadata.
    Implementations must be fully populated before the first lookup
    and must not change afterwards.
    """

    @abstractmethod
    def lookup(self, code: str) -> Optional[Currency]:
        """Get the currency for a code (any case), if it is known."""
        raise NotImplementedError()

    @abstractmethod
    def codes(self) -> list[str]:
        raise NotImplementedError()

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.lookup(code) is not None
