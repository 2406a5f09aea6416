"""Utility modules for xml_studio."""

from xml_studio.utils.logger import (
    configure_from_settings,
    get_logger,
    resolve_level,
    setup_logger,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "resolve_level",
    "configure_from_settings",
]
