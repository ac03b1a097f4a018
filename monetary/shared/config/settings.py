from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from monetary.domain.exceptions import InvalidRoundingModeError
from monetary.domain.values import RoundingMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    DEFAULT_ROUNDING_MODE: RoundingMode = Field(
        default=RoundingMode.HALF_UP,
        description="Rounding mode used when a caller does not pass one",
        examples=["half_up", "HALF_EVEN"],
    )

    STRICT_ROUNDING_MODE: bool = Field(
        default=False,
        description=(
            "Raise InvalidRoundingModeError for unknown rounding modes "
            "instead of falling back to HALF_UP"
        ),
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("DEFAULT_ROUNDING_MODE", mode="before")
    @classmethod
    def validate_rounding_mode(cls, value: object) -> RoundingMode:
        try:
            return RoundingMode.from_value(value)
        except InvalidRoundingModeError as e:
            raise ValueError(str(e)) from e


@lru_cache()
def get_settings() -> Settings:
    from monetary.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.info("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
