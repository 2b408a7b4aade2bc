"""Configuration loading for bounded-lru."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime defaults derived from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOUNDED_LRU_",
        env_file=".env",
        extra="ignore",
    )

    default_capacity: int = Field(
        10,
        ge=0,
        description="Capacity used by LRUCache.from_settings when none is given",
    )
    log_level: str = Field("INFO", description="Root log level")
    log_json: bool = Field(True, description="Render logs as JSON instead of console output")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
