"""CLI commands for xml_studio."""

import asyncio
from pathlib import Path

import click

from xml_studio import __version__
from xml_studio.cli.validators import validate_config_file, validate_input_file
from xml_studio.exceptions import XmlStudioError
from xml_studio.models import ProcessingResult, StatusType

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}

STATUS_COLORS = {
    StatusType.SUCCESS: "green",
    StatusType.ERROR: "red",
    StatusType.LOADING: "blue",
    StatusType.IDLE: None,
}


class AliasedGroup(click.Group):
    """Click group with command aliases support."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        aliases = {
            "f": "format",
            "m": "minify",
            "v": "validate",
            "fix": "repair",
            "json": "to-json",
        }
        cmd_name = aliases.get(cmd_name, cmd_name)
        return super().get_command(ctx, cmd_name)


def _run_async(coro):
    """Run an async coroutine."""
    return asyncio.run(coro)


def _build_studio(ctx: click.Context):
    from xml_studio.studio import XmlStudio

    return XmlStudio.from_settings(ctx.obj["settings"])


def _load_input(studio, input_file: Path | None) -> None:
    """Fill the input pane from a file or stdin."""
    if input_file is not None:
        try:
            studio.load_file(input_file)
        except XmlStudioError as e:
            raise click.ClickException(str(e)) from e
    else:
        studio.set_input(click.get_text_stream("stdin").read())

    if not studio.input_xml.strip():
        raise click.UsageError("No XML input provided")


def _report(ctx: click.Context, result: ProcessingResult) -> None:
    """Print the status line to stderr and exit 1 on failure."""
    if result.message and not ctx.obj.get("quiet"):
        click.echo(click.style(result.message, fg=STATUS_COLORS[result.status]), err=True)
        if result.error and result.error.line:
            click.echo(f"  at line {result.error.line}", err=True)
    if not result.ok:
        ctx.exit(1)


def _write(content: str, output: Path | None) -> None:
    if output is None:
        click.echo(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def _finish(ctx: click.Context, studio, result: ProcessingResult, output: Path | None, download: bool) -> None:
    _report(ctx, result)
    if download:
        try:
            path = studio.download()
        except XmlStudioError as e:
            raise click.ClickException(str(e)) from e
        if path is not None and not ctx.obj.get("quiet"):
            click.echo(click.style(f"Saved {path}", fg="green"), err=True)
    _write(result.content, output)


input_argument = click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    callback=validate_input_file,
)

output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the result to this file instead of stdout",
)

download_option = click.option(
    "--download",
    "-d",
    is_flag=True,
    default=False,
    help="Also save formatted.xml / formatted.json into the download directory",
)


@click.group(cls=AliasedGroup, context_settings=CONTEXT_SETTINGS)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
    callback=validate_config_file,
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress status messages",
)
@click.version_option(version=__version__, prog_name="xml-studio")
@click.pass_context
def cli(ctx: click.Context, config: Path | None, verbose: bool, quiet: bool) -> None:
    """XML Studio - XML Formatter & AI Tools

    Format, minify and validate XML locally; repair, convert to JSON and
    generate samples with an LLM.

    \b
    Examples:
        xml-studio format broken.xml
        cat feed.xml | xml-studio minify -o feed.min.xml
        xml-studio repair broken.xml -o fixed.xml
        xml-studio to-json catalog.xml --download
    """
    from xml_studio.config import load_config
    from xml_studio.utils.logger import configure_from_settings, resolve_level

    ctx.ensure_object(dict)

    try:
        settings = load_config(config)
    except XmlStudioError as e:
        raise click.ClickException(str(e)) from e

    ctx.obj["config_path"] = config
    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    configure_from_settings(
        settings,
        level=resolve_level(settings.logging.level, verbose=verbose, quiet=quiet),
    )


@cli.command(name="format")
@input_argument
@output_option
@download_option
@click.pass_context
def format_command(ctx: click.Context, input_file: Path | None, output: Path | None, download: bool) -> None:
    """Validate and pretty-print XML (two-space indent, CRLF lines).

    \b
    Examples:
        xml-studio format data.xml
        xml-studio format data.xml -o pretty.xml
    """
    studio = _build_studio(ctx)
    _load_input(studio, input_file)
    _finish(ctx, studio, studio.format(), output, download)


@cli.command()
@input_argument
@output_option
@download_option
@click.pass_context
def minify(ctx: click.Context, input_file: Path | None, output: Path | None, download: bool) -> None:
    """Validate and strip whitespace between tags."""
    studio = _build_studio(ctx)
    _load_input(studio, input_file)
    _finish(ctx, studio, studio.minify(), output, download)


@cli.command()
@input_argument
@click.pass_context
def validate(ctx: click.Context, input_file: Path | None) -> None:
    """Check that XML is well-formed.

    Exits with status 1 and prints the parser message when it is not.
    """
    studio = _build_studio(ctx)
    _load_input(studio, input_file)
    _report(ctx, studio.validate())


@cli.command()
@input_argument
@output_option
@click.pass_context
def repair(ctx: click.Context, input_file: Path | None, output: Path | None) -> None:
    """Repair malformed XML with the LLM and print the formatted result."""
    studio = _build_studio(ctx)
    _load_input(studio, input_file)
    _finish(ctx, studio, _run_async(studio.repair()), output, download=False)


@cli.command(name="to-json")
@input_argument
@output_option
@download_option
@click.pass_context
def to_json(ctx: click.Context, input_file: Path | None, output: Path | None, download: bool) -> None:
    """Convert XML to JSON with the LLM."""
    studio = _build_studio(ctx)
    _load_input(studio, input_file)
    _finish(ctx, studio, _run_async(studio.convert_to_json()), output, download)


@cli.command()
@output_option
@click.pass_context
def sample(ctx: click.Context, output: Path | None) -> None:
    """Generate a sample library catalog document with the LLM."""
    studio = _build_studio(ctx)
    result = _run_async(studio.generate_sample())
    _report(ctx, result)
    _write(studio.input_xml, output)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show version and effective configuration."""
    settings = ctx.obj["settings"]
    config_path = ctx.obj.get("config_path")

    click.echo(click.style("XML Studio Status", fg="cyan", bold=True))
    click.echo("=" * 40)

    click.echo(f"\nVersion: {__version__}")
    click.echo(f"Config File: {config_path or 'Using defaults'}")

    click.echo(f"\nLLM Model: {settings.llm.model}")
    click.echo(f"LLM URL: {settings.llm.base_url}")
    if settings.llm.api_key:
        click.echo(click.style("  ✓ API key configured", fg="green"))
    else:
        click.echo(click.style("  ✗ API key missing (AI features disabled)", fg="red"))

    click.echo(f"\nDownload Directory: {settings.get_download_dir()}")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
