"""Runtime settings loaded from the environment and an optional .env file."""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

ENV_PREFIX = "STANDINGS_DAT_"


class Settings(BaseModel):
    """Settings for extraction, file handling and logging."""

    log_level: str = "WARNING"
    html_parser: str = "lxml"  # BeautifulSoup tree builder
    encoding: str = "utf-8"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from STANDINGS_DAT_* environment variables.

        Unset variables keep their defaults.
        """
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw:
                values[name] = raw
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load .env once and return the cached settings."""
    load_dotenv()
    return Settings.from_env()
