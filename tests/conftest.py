import pytest

from monetary.adapters.outbound.registry import InMemoryCurrencyRegistry
from monetary.domain.services import MoneyFactory, MoneyParser


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("DEFAULT_ROUNDING_MODE", "half_up")
    monkeypatch.setenv("STRICT_ROUNDING_MODE", "false")

    from monetary.shared.config import get_settings

    get_settings.cache_clear()


@pytest.fixture
def registry() -> InMemoryCurrencyRegistry:
    return InMemoryCurrencyRegistry()


@pytest.fixture
def factory(registry) -> MoneyFactory:
    return MoneyFactory(registry)


@pytest.fixture
def parser(factory) -> MoneyParser:
    return MoneyParser(factory)
