"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration with sensible defaults."""

    log_level: str = Field(default="info", alias="LOG_LEVEL")
    metrics_enabled: bool = Field(default=True, alias="METRICS_ENABLED")
    random_seed: int | None = Field(default=None, alias="RANDOM_SEED")
    number_upper_bound: int = Field(default=1_000_000_000, alias="NUMBER_UPPER_BOUND")
    lambda_lifespan: Literal["auto", "on", "off"] = Field(default="off", alias="LAMBDA_LIFESPAN")
    api_gateway_base_path: str = Field(default="/", alias="API_GATEWAY_BASE_PATH")
    service_version: str = Field(default="0.1.0", alias="SERVICE_VERSION")
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    dev_reload: bool = Field(default=False, alias="DEV_RELOAD")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("random_seed", mode="before")
    @classmethod
    def blank_seed_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
