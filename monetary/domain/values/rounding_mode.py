from enum import Enum
from typing import Union

from monetary.domain.exceptions import InvalidRoundingModeError


class RoundingMode(Enum):
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    UP = "up"
    DOWN = "down"
    HALF_EVEN = "half_even"  # banker's rounding

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Union["RoundingMode", str]) -> "RoundingMode":
        """
        Resolve a rounding mode from a member, a member name or a value.
        Matching ignores case, dashes and underscores ("half-even", "HalfEven").

        :raises InvalidRoundingModeError: if nothing matches
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            wanted = value.strip().replace("-", "").replace("_", "").upper()
            for mode in cls:
                if mode.name.replace("_", "") == wanted:
                    return mode

        raise InvalidRoundingModeError(value)
