"""Input validators for CLI commands."""

from pathlib import Path

import click
import yaml

from xml_studio.storage.base import ACCEPTED_EXTENSIONS


def validate_input_file(
    ctx: click.Context,
    param: click.Parameter,
    value: Path | None,
) -> Path | None:
    """Accept only .xml and .txt uploads.

    Args:
        ctx: Click context
        param: Click parameter
        value: Path value to validate

    Returns:
        Validated path or None (read from stdin)

    Raises:
        click.BadParameter: If validation fails
    """
    if value is None:
        return None

    if value.suffix.lower() not in ACCEPTED_EXTENSIONS:
        raise click.BadParameter(
            f"Input file must be one of {', '.join(sorted(ACCEPTED_EXTENSIONS))}: {value}"
        )

    return value


def validate_config_file(
    ctx: click.Context,
    param: click.Parameter,
    value: Path | None,
) -> Path | None:
    """Validate configuration file.

    Args:
        ctx: Click context
        param: Click parameter
        value: Path value to validate

    Returns:
        Validated path or None

    Raises:
        click.BadParameter: If validation fails
    """
    if value is None:
        return None

    if not value.exists():
        raise click.BadParameter(f"Config file does not exist: {value}")

    if value.suffix.lower() not in {".yaml", ".yml"}:
        raise click.BadParameter(f"Config file must be YAML format: {value}")

    try:
        with open(value, encoding="utf-8") as f:
            config = yaml.safe_load(f)
            if config is None:
                raise click.BadParameter(f"Config file is empty: {value}")
    except yaml.YAMLError as e:
        raise click.BadParameter(f"Invalid YAML in config file: {e}") from None

    return value
