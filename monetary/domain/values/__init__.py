from .rounding_mode import RoundingMode
from .format_options import FormatOptions
from .currency import Currency
from .money import Money

__all__ = [
    "Currency",
    "FormatOptions",
    "Money",
    "RoundingMode",
]
