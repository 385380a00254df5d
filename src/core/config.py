"""
Runtime settings for Finport, read from ``FINPORT_*`` environment variables.

Only ambient concerns are configurable (runtime environment, log output,
app metadata). Portfolio name rules are business invariants and live as
fixed constants in `src/core/constants.py`.

Every field has a default, so the portfolio domain can be imported and
exercised without any environment setup.

Usage:
    from src.core.config import settings

    level = settings.effective_log_level
    use_json = not settings.is_development
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import LOG_LEVELS
from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Finport settings.

    Values come from ``FINPORT_<FIELD>`` environment variables (matched
    case-insensitively) and fall back to the defaults below.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment; selects console vs JSON log rendering",
    )
    debug: bool = Field(
        default=False,
        description="Force DEBUG logging regardless of log_level",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level emitted by the logger",
    )

    app_name: str = Field(
        default="Finport",
        description="Name reported in log context",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Version reported in log context",
    )

    model_config = SettingsConfigDict(
        env_prefix="FINPORT_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize the level name to upper case and reject unknown names.

        Raises:
            ValueError: If the name is not one of DEBUG, INFO, WARNING,
                ERROR, CRITICAL.
        """
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug override."""
        return "DEBUG" if self.debug else self.log_level

    @property
    def is_development(self) -> bool:
        """True when running on a developer machine (console log output)."""
        return self.environment is Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Build the process-wide Settings once.

    Call ``get_settings.cache_clear()`` to re-read the environment (tests).
    """
    return Settings()


settings = get_settings()
