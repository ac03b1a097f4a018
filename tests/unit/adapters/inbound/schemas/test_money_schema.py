import pytest
from pydantic import ValidationError

from monetary.adapters.inbound.schemas import MoneyPayload, MoneyPayloadMapper
from monetary.domain.exceptions import InvalidCurrencyError


@pytest.fixture
def mapper(factory) -> MoneyPayloadMapper:
    return MoneyPayloadMapper(factory)


def test_to_payload_keeps_smallest_units(factory, mapper):
    payload = mapper.to_payload(factory.from_decimal(12.34, "USD"))

    assert payload == MoneyPayload(amount=1234, currency="USD")
    assert payload.model_dump() == {"amount": 1234, "currency": "USD"}


def test_from_dict_builds_money(factory, mapper):
    money = mapper.from_dict({"amount": -500, "currency": "eur"})

    assert money == factory.from_smallest_unit(-500, "EUR")


def test_payload_rejects_float_amounts():
    with pytest.raises(ValidationError):
        MoneyPayload(amount=12.34, currency="USD")  # type: ignore[arg-type]


def test_payload_rejects_out_of_range_amounts():
    with pytest.raises(ValidationError):
        MoneyPayload(amount=2**63, currency="USD")


@pytest.mark.parametrize("currency", ["US", "USDT", "U$D"])
def test_payload_rejects_bad_currency_codes(currency):
    with pytest.raises(ValidationError):
        MoneyPayload(amount=1, currency=currency)


def test_from_dict_unknown_currency(mapper):
    with pytest.raises(InvalidCurrencyError):
        mapper.from_dict({"amount": 1, "currency": "XXX"})
