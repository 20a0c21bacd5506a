from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DEEPROUND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    PRECISION_TAG_KEY: str = Field(
        default="precision",
        min_length=1,
        description="Field metadata key holding the precision tag",
    )

    ROUNDING_MAX_DEPTH: int = Field(
        default=256,
        ge=1,
        le=400,
        description="Maximum nesting depth walked before giving up",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid DEEPROUND_LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("PRECISION_TAG_KEY")
    @classmethod
    def validate_precision_tag_key(cls, value: str) -> str:
        if any(ch.isspace() for ch in value):
            raise ValueError(
                f"DEEPROUND_PRECISION_TAG_KEY must not contain whitespace: '{value}'"
            )
        return value


@lru_cache()
def get_settings() -> Settings:
    from deepround.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.debug("settings_loaded")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
