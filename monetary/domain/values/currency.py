from dataclasses import dataclass, field

from .format_options import FormatOptions


@dataclass(frozen=True)
class Currency:
    code: str
    scale: int
    default_format: FormatOptions = field(default_factory=FormatOptions)

    def __post_init__(self) -> None:
        if not self.code or not self.code.isalpha() or not self.code.isascii():
            raise ValueError(f"Currency code must be alphabetic: {self.code!r}")
        if self.scale < 0:
            raise ValueError(f"Currency scale cannot be negative: {self.scale}")

        object.__setattr__(self, "code", self.code.upper())

    def __str__(self) -> str:
        return self.code

    @property
    def divisor(self) -> int:
        return 10**self.scale
