"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PATHGRAPH_DEFAULT_CAPACITY=128 (bucket count of a ``HashtableMap`` created
  without an explicit capacity)
- PATHGRAPH_LOG_LEVEL=DEBUG (level used by ``configure_logging``)
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """pathgraph configuration.

    Environment variables prefixed with PATHGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHGRAPH_", frozen=True)

    default_capacity: PositiveInt = 64
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"not a logging level: {value!r}")
        return value


@lru_cache
def get_settings() -> Settings:
    """Returns settings read once from the environment.

    Call ``get_settings.cache_clear()`` to pick up changed variables.
    """
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Attaches a stream handler to the root logger at the configured level."""
    if settings is None:
        settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger("pathgraph").setLevel(settings.log_level)
