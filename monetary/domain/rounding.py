"""
Rounding engine: maps a decimal value onto an integer count of smallest units.

All arithmetic here is plain IEEE-754 double precision. Results are defined
against float behaviour, not against exact decimal arithmetic, e.g.
round_amount(1.1, 2, RoundingMode.UP) == 111 because 1.1 * 100 is
110.00000000000001.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable

from monetary.domain.exceptions import InvalidRoundingModeError
from monetary.domain.values.rounding_mode import RoundingMode
from monetary.shared.logging import get_logger

logger = get_logger(__name__)

# Subtracted before the +0.5 bias of HALF_DOWN. Must stay exactly this value.
HALF_DOWN_EPSILON = 0.00001

FALLBACK_MODE = RoundingMode.HALF_UP


def round_half_away_from_zero(value: float) -> int:
    """Nearest integer, ties away from zero (unlike the builtin round())."""
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        return truncated + (1 if value > 0 else -1)
    return truncated


def _half_down(scaled: float) -> int:
    return math.floor(scaled + 0.5 - HALF_DOWN_EPSILON)


def _half_even(scaled: float) -> int:
    truncated = math.trunc(scaled)
    if abs(scaled - truncated) == 0.5:
        if truncated % 2 == 0:
            return truncated
        return truncated + (1 if scaled > 0 else -1)
    return round_half_away_from_zero(scaled)


_STRATEGIES: dict[RoundingMode, Callable[[float], int]] = {
    RoundingMode.HALF_UP: round_half_away_from_zero,
    RoundingMode.HALF_DOWN: _half_down,
    RoundingMode.UP: math.ceil,
    RoundingMode.DOWN: math.floor,
    RoundingMode.HALF_EVEN: _half_even,
}


@dataclass(frozen=True)
class RoundingPolicy:
    """
    How unrecognized rounding modes are treated.

    strict=False falls back to HALF_UP (and logs a warning),
    strict=True raises InvalidRoundingModeError.
    """

    strict: bool = False

    def resolve(self, mode: Any) -> RoundingMode:
        try:
            return RoundingMode.from_value(mode)
        except InvalidRoundingModeError:
            if self.strict:
                raise

        logger.warning(
            "rounding_mode_fallback", requested=repr(mode), fallback=str(FALLBACK_MODE)
        )
        return FALLBACK_MODE


def round_amount(value: float, scale: int, mode: Any = RoundingMode.HALF_UP) -> int:
    """
    Scale a decimal value by 10**scale and round it to an integer.

    :param value: Finite decimal value (callers reject NaN and infinities)
    :param scale: Number of fractional digits to keep
    :param mode: RoundingMode; anything unrecognized falls back to HALF_UP
    :return: Integer amount in units of 10**-scale
    """
    if not isinstance(mode, RoundingMode):
        mode = RoundingPolicy().resolve(mode)

    multiplier = float(10**scale)
    scaled = float(value) * multiplier

    return _STRATEGIES[mode](scaled)
