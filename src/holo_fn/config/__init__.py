"""Configuration management using pydantic-settings."""

from .settings import HoloSettings, InspectSettings, clear_settings_cache, get_settings

__all__ = [
    "HoloSettings",
    "InspectSettings",
    "clear_settings_cache",
    "get_settings",
]
