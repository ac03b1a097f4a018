from .factory import MoneyFactory
from .parser_service import MoneyParser

__all__ = [
    "MoneyFactory",
    "MoneyParser",
]
