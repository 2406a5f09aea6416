"""Configuration management module."""

from xml_studio.config.loader import get_settings, load_config, reset_settings
from xml_studio.config.settings import (
    LLMSettings,
    LoggingSettings,
    OutputSettings,
    Settings,
)

__all__ = [
    "Settings",
    "LLMSettings",
    "LoggingSettings",
    "OutputSettings",
    "load_config",
    "get_settings",
    "reset_settings",
]
