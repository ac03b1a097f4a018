from .currency_registry import CurrencyRegistry

__all__ = ["CurrencyRegistry"]
