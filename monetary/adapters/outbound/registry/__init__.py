from .currencies import DEFAULT_CURRENCIES
from .in_memory_registry import InMemoryCurrencyRegistry

__all__ = [
    "DEFAULT_CURRENCIES",
    "InMemoryCurrencyRegistry",
]
