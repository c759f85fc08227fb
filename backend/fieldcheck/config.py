"""Runtime configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix ``FIELDCHECK_``)."""

    # Logging
    LOG_LEVEL: str = "info"
    LOG_JSON: bool = False
    DEBUG: bool = False

    model_config = {
        "env_prefix": "FIELDCHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
