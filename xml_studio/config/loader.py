"""Configuration loader module."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from xml_studio.config.settings import Settings
from xml_studio.exceptions import ConfigurationError

ENV_PREFIX = "XML_STUDIO_"
CONFIG_PATH_VAR = f"{ENV_PREFIX}CONFIG"

# Checked in order when no key is configured under llm.api_key
API_KEY_FALLBACK_VARS = ("GEMINI_API_KEY", "API_KEY")


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary (values take precedence)

    Returns:
        Merged dictionary
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML configuration file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML content as dictionary

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {path}: {e}") from e

    if not content:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Configuration file must contain a mapping: {path}")
    return content


def _get_default_config() -> dict[str, Any]:
    """Get default configuration."""
    return Settings().model_dump()


def _coerce_env_value(raw: str, current: Any) -> Any:
    """Convert an environment string to the type of the value it replaces."""
    if isinstance(current, bool):
        return raw.lower() in ("true", "1", "yes")
    for kind in (int, float):
        if isinstance(current, kind):
            try:
                return kind(raw)
            except ValueError:
                # Left as text so validation reports the bad value
                return raw
    return raw


def _api_key_from_environment() -> str | None:
    """First non-empty credential among the fallback variables."""
    for var in API_KEY_FALLBACK_VARS:
        if os.environ.get(var):
            return os.environ[var]
    return None


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides to configuration.

    Environment variables are prefixed with XML_STUDIO_ and use a double
    underscore (__) to separate nested keys. XML_STUDIO_CONFIG names the
    configuration file and is not a setting.

    Example:
        XML_STUDIO_LLM__API_KEY=secret
        XML_STUDIO_LLM__TIMEOUT=30

    Args:
        config: Base configuration dictionary

    Returns:
        Configuration with environment overrides applied
    """
    result = config.copy()

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key == CONFIG_PATH_VAR:
            continue

        *sections, field_name = key[len(ENV_PREFIX) :].lower().split("__")

        target = result
        for section in sections:
            target = target.setdefault(section, {})
            if not isinstance(target, dict):
                break
        else:
            target[field_name] = _coerce_env_value(value, target.get(field_name))

    llm = result.get("llm")
    if isinstance(llm, dict) and not llm.get("api_key"):
        llm["api_key"] = _api_key_from_environment()

    return result


def load_config(config_path: str | Path | None = None) -> Settings:
    """Load configuration from file with defaults and environment overrides.

    Loading order (later overrides earlier):
    1. Default configuration
    2. Configuration file (if provided)
    3. Environment variables

    Args:
        config_path: Optional path to configuration file

    Returns:
        Validated Settings object

    Raises:
        ConfigurationError: If configuration is invalid
    """
    config = _get_default_config()

    if config_path:
        file_config = _load_yaml_file(Path(config_path))
        config = _deep_merge(config, file_config)

    config = _apply_env_overrides(config)

    try:
        return Settings.model_validate(config)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    The first call loads from XML_STUDIO_CONFIG or the first default
    location that exists.
    """
    config_path = os.environ.get(CONFIG_PATH_VAR)

    if not config_path:
        default_locations = [
            Path("config.yaml"),
            Path("config/config.yaml"),
            Path.home() / ".xml_studio" / "config.yaml",
        ]
        for location in default_locations:
            if location.exists():
                config_path = str(location)
                break

    return load_config(config_path)


def reset_settings() -> None:
    """Clear the cached settings so the next get_settings() call reloads."""
    get_settings.cache_clear()
