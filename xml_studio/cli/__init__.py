"""Command-line interface for xml_studio."""

from xml_studio.cli.commands import cli, main

__all__ = ["cli", "main"]
