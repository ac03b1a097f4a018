from .money import MoneyPayload, MoneyPayloadMapper

__all__ = [
    "MoneyPayload",
    "MoneyPayloadMapper",
]
