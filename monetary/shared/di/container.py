from dependency_injector import containers, providers

from monetary.adapters.inbound.schemas import MoneyPayloadMapper
from monetary.adapters.outbound.registry import (
    DEFAULT_CURRENCIES,
    InMemoryCurrencyRegistry,
)
from monetary.domain.rounding import RoundingPolicy
from monetary.domain.services import MoneyFactory, MoneyParser
from monetary.shared.config import get_settings
from monetary.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    rounding_policy = providers.Singleton(
        RoundingPolicy,
        strict=config.strict_rounding_mode,
    )

    currency_registry = providers.Singleton(
        InMemoryCurrencyRegistry,
        currencies=DEFAULT_CURRENCIES,
    )

    money_factory = providers.Singleton(
        MoneyFactory,
        registry=currency_registry,
        rounding_policy=rounding_policy,
        default_mode=config.default_rounding_mode,
    )

    money_parser = providers.Singleton(
        MoneyParser,
        money_factory=money_factory,
    )

    payload_mapper = providers.Singleton(
        MoneyPayloadMapper,
        money_factory=money_factory,
    )


def get_container(setup_logging: bool = True) -> Container:
    settings = get_settings()

    if setup_logging:
        configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    container = Container()

    container.config.from_dict(
        {
            "strict_rounding_mode": settings.STRICT_ROUNDING_MODE,
            "default_rounding_mode": settings.DEFAULT_ROUNDING_MODE,
        }
    )

    logger.info(
        "di_container_configured",
        default_rounding_mode=str(settings.DEFAULT_ROUNDING_MODE),
        strict_rounding_mode=settings.STRICT_ROUNDING_MODE,
    )

    return container
