"""Runtime settings read from ``QUIZ_TAKER_*`` environment variables or ``.env``."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from quiz_taker.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    PRACTICE_HOST,
    PRACTICE_PORT,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="QUIZ_TAKER_", env_file=".env", extra="ignore")

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    log_level: str = "INFO"
    practice_host: str = PRACTICE_HOST
    practice_port: int = PRACTICE_PORT


def load_settings(**overrides: object) -> Settings:
    """Read settings now. Keyword overrides win over the environment."""
    return Settings(**overrides)
