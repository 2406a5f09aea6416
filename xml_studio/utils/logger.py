"""Logging configuration using loguru.

Console records go to stderr so formatted documents written to stdout stay
clean. Every module logger carries a ``component`` extra (its module name
without the package prefix) that the default formats print.
"""

import sys
from pathlib import Path
from typing import Any, TextIO

from loguru import logger

PACKAGE_PREFIX = "xml_studio."

DEFAULT_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | "
    "<level>{message}</level>"
)

DEFAULT_FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[component]}:{function}:{line} | {message}"
)

_logger_configured = False


def setup_logger(
    log_level: str = "WARNING",
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: bool = True,
    console_format: str | None = None,
    file_format: str | None = None,
    stream: TextIO | None = None,
) -> Any:
    """Configure and setup the logger.

    Args:
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file (None for console only)
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 week")
        compression: Whether to compress rotated logs
        console_format: Custom console log format
        file_format: Custom file log format
        stream: Console stream, stderr when omitted

    Returns:
        Configured logger instance
    """
    global _logger_configured

    logger.remove()
    logger.configure(extra={"component": "xml_studio"})

    # Colors only when writing to a terminal
    logger.add(
        stream or sys.stderr,
        level=log_level.upper(),
        format=console_format or DEFAULT_CONSOLE_FORMAT,
        colorize=None,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_path),
            level="DEBUG",  # File always captures DEBUG level
            format=file_format or DEFAULT_FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            compression="zip" if compression else None,
            encoding="utf-8",
        )

    _logger_configured = True
    return logger


def get_logger(name: str | None = None) -> Any:
    """Get a logger bound to a component name.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    if not _logger_configured:
        setup_logger()

    if name:
        return logger.bind(component=name.removeprefix(PACKAGE_PREFIX))
    return logger


def resolve_level(configured: str, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level for a CLI run; --quiet wins over --verbose."""
    if quiet:
        return "ERROR"
    if verbose:
        return "DEBUG"
    return configured


def configure_from_settings(settings: Any, level: str | None = None) -> Any:
    """Configure logger from Settings object.

    Args:
        settings: Settings object with logging configuration
        level: Console level overriding ``settings.logging.level``

    Returns:
        Configured logger instance
    """
    logging_config = settings.logging

    return setup_logger(
        log_level=level or logging_config.level,
        log_file=logging_config.file,
        rotation=logging_config.rotation,
        retention=logging_config.retention,
        compression=logging_config.compression,
        console_format=logging_config.console_format,
    )
