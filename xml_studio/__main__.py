"""Entry point for running xml_studio as a module."""

from xml_studio.cli import cli

if __name__ == "__main__":
    cli()
