"""Library settings using Pydantic v2 Settings.

Loaded from TEXTCONF_* environment variables. Argument delimiters are not
settings: they travel with each template.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """textconf settings."""

    model_config = SettingsConfigDict(
        env_prefix="TEXTCONF_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation used when saving JSON documents.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached Settings instance."""
    return Settings()
