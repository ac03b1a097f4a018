from pydantic import BaseModel, ConfigDict, Field, field_validator

from monetary.domain.services.factory import MoneyFactory
from monetary.domain.values import Money
from monetary.domain.values.money import INT64_MAX, INT64_MIN


class MoneyPayload(BaseModel):
    """Wire shape of Money. The amount is always smallest units, never a float."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(
        ge=INT64_MIN,
        le=INT64_MAX,
        strict=True,
        description="Amount in the currency's smallest unit.",
        examples=[123456],
    )
    currency: str = Field(
        min_length=3,
        max_length=3,
        description="ISO 4217 currency code.",
        examples=["USD"],
    )

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        if not (v.isascii() and v.isalpha()):
            raise ValueError(f"Currency must only contain letters: {v}")
        return v.upper()


class MoneyPayloadMapper:
    def __init__(self, money_factory: MoneyFactory) -> None:
        self._money_factory = money_factory

    @staticmethod
    def to_payload(money: Money) -> MoneyPayload:
        return MoneyPayload(amount=money.amount, currency=money.currency_code)

    def from_payload(self, payload: MoneyPayload) -> Money:
        return self._money_factory.from_smallest_unit(payload.amount, payload.currency)

    def from_dict(self, data: dict) -> Money:
        """
        :raises pydantic.ValidationError: if the payload shape is wrong
        :raises InvalidCurrencyError: if the currency is not in the registry
        """
        return self.from_payload(MoneyPayload.model_validate(data))
