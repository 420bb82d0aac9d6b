"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables (prefix RULECHECK_)."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Validation
    STRICT_RULES: bool = False  # Reject non-integer min/max/minLen/maxLen arguments

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "RULECHECK_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
