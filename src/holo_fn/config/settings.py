"""Environment-based configuration using pydantic-settings.

Only the debug helpers read configuration; containers and aggregators
are pure and ignore it.

Example:
    >>> from holo_fn.config import get_settings
    >>> get_settings().inspect.level
    'WARNING'

    # Or with environment variables:
    # HOLO_FN_INSPECT_LEVEL=DEBUG
    # HOLO_FN_INSPECT_FORMAT=json
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InspectSettings(BaseSettings):
    """Where and how ``inspect`` logs values.
    
    WARNING by default so output reaches stderr through logging's
    last-resort handler before the application configures logging.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="HOLO_FN_INSPECT_",
        extra="ignore",
    )
    
    logger_name: str = Field(default="holo_fn.inspect", description="Logger used by inspect()")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"
    
    @computed_field
    @property
    def levelno(self) -> int:
        """Numeric logging level."""
        return logging.getLevelNamesMapping()[self.level]


class HoloSettings(BaseSettings):
    """Root settings, loaded from ``HOLO_FN_`` environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="HOLO_FN_",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )
    
    inspect: InspectSettings = Field(default_factory=InspectSettings)


@lru_cache(maxsize=1)
def get_settings() -> HoloSettings:
    """Get the global settings instance (cached)."""
    return HoloSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
