"""Test CLI commands."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from xml_studio import __version__
from xml_studio.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


class TestCLIBasic:
    """Test basic CLI functionality."""

    def test_help(self, runner: CliRunner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "XML Studio" in result.output
        for command in ("format", "minify", "validate", "repair", "to-json", "sample", "status"):
            assert command in result.output

    def test_version(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_format_help(self, runner: CliRunner):
        result = runner.invoke(cli, ["format", "--help"])
        assert result.exit_code == 0
        assert "--output" in result.output
        assert "--download" in result.output

    def test_missing_config_file(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yaml"), "status"])
        assert result.exit_code != 0

    def test_status_without_key(self, runner: CliRunner):
        result = runner.invoke(cli, ["status"])
        assert result.exit_code == 0
        assert "gemini-2.5-flash" in result.output
        assert "API key missing" in result.output

    def test_status_with_config(self, runner: CliRunner, sample_config: Path):
        result = runner.invoke(cli, ["--config", str(sample_config), "status"])
        assert result.exit_code == 0
        assert "test-model" in result.output
        assert "API key configured" in result.output


class TestLocalCommands:
    """Test format, minify and validate."""

    def test_format_file(self, runner: CliRunner, sample_xml_file: Path, tmp_path: Path):
        output = tmp_path / "pretty.xml"
        result = runner.invoke(cli, ["format", str(sample_xml_file), "-o", str(output)])

        assert result.exit_code == 0
        assert "XML formatted successfully" in result.output
        assert output.read_bytes() == (
            b'<catalog>\r\n  <book id="1">\r\n    <title>Dune</title>\r\n'
            b'  </book>\r\n  <book id="2"/>\r\n</catalog>'
        )

    def test_format_stdin(self, runner: CliRunner):
        result = runner.invoke(cli, ["format"], input="<root><item>1</item></root>")
        assert result.exit_code == 0
        assert "  <item>1</item>" in result.output

    def test_format_alias(self, runner: CliRunner):
        result = runner.invoke(cli, ["f"], input="<a><b/></a>")
        assert result.exit_code == 0
        assert "  <b/>" in result.output

    def test_format_invalid(self, runner: CliRunner, broken_xml_file: Path):
        result = runner.invoke(cli, ["format", str(broken_xml_file)])
        assert result.exit_code == 1
        assert "Invalid XML" in result.output

    def test_empty_input(self, runner: CliRunner):
        result = runner.invoke(cli, ["format"], input="  \n")
        assert result.exit_code == 2
        assert "No XML input provided" in result.output

    def test_rejects_unsupported_extension(self, runner: CliRunner, tmp_path: Path):
        data = tmp_path / "data.json"
        data.write_text("{}")
        result = runner.invoke(cli, ["format", str(data)])
        assert result.exit_code == 2

    def test_format_download(self, runner: CliRunner, sample_xml_file: Path, tmp_path: Path):
        downloads = tmp_path / "downloads"
        result = runner.invoke(
            cli,
            ["format", str(sample_xml_file), "--download"],
            env={"XML_STUDIO_OUTPUT__DOWNLOAD_DIR": str(downloads)},
        )
        assert result.exit_code == 0
        assert (downloads / "formatted.xml").read_bytes().startswith(b"<catalog>\r\n")

    def test_minify(self, runner: CliRunner, sample_xml_file: Path, tmp_path: Path):
        output = tmp_path / "min.xml"
        result = runner.invoke(cli, ["minify", str(sample_xml_file), "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_text() == (
            '<catalog><book id="1"><title>Dune</title></book><book id="2"/></catalog>'
        )

    def test_minify_invalid(self, runner: CliRunner, broken_xml_file: Path):
        result = runner.invoke(cli, ["m", str(broken_xml_file)])
        assert result.exit_code == 1
        assert "Cannot minify invalid XML" in result.output

    def test_validate_ok(self, runner: CliRunner, sample_xml_file: Path):
        result = runner.invoke(cli, ["validate", str(sample_xml_file)])
        assert result.exit_code == 0
        assert "XML is well-formed" in result.output

    def test_validate_reports_line(self, runner: CliRunner):
        result = runner.invoke(cli, ["v"], input="<a>\n<b>\n</a>")
        assert result.exit_code == 1
        assert "Invalid XML" in result.output
        assert "at line" in result.output

    def test_quiet_suppresses_status(self, runner: CliRunner):
        result = runner.invoke(cli, ["-q", "validate"], input="<a/>")
        assert result.exit_code == 0
        assert "well-formed" not in result.output


class TestRemoteCommands:
    """Test repair, to-json and sample with the assistant patched out."""

    def test_repair(self, runner: CliRunner, broken_xml_file: Path, tmp_path: Path):
        output = tmp_path / "fixed.xml"
        with patch(
            "xml_studio.agents.assistant.XmlAssistant.repair",
            new=AsyncMock(return_value="<catalog><book/></catalog>"),
        ):
            result = runner.invoke(cli, ["repair", str(broken_xml_file), "-o", str(output)])

        assert result.exit_code == 0
        assert "XML repaired by AI" in result.output
        assert output.read_bytes() == b"<catalog>\r\n  <book/>\r\n</catalog>"

    def test_repair_skips_well_formed_input(self, runner: CliRunner, sample_xml_file: Path, tmp_path: Path):
        output = tmp_path / "same.xml"
        with patch("xml_studio.agents.assistant.XmlAssistant.repair", new=AsyncMock()) as repair_mock:
            result = runner.invoke(cli, ["repair", str(sample_xml_file), "-o", str(output)])

        assert result.exit_code == 0
        repair_mock.assert_not_called()
        assert output.read_bytes().startswith(b"<catalog>\r\n")

    def test_repair_without_api_key(self, runner: CliRunner, broken_xml_file: Path):
        result = runner.invoke(cli, ["fix", str(broken_xml_file)])
        assert result.exit_code == 1
        assert "AI Repair failed. Please check your API Key." in result.output

    def test_to_json(self, runner: CliRunner, sample_xml_file: Path, tmp_path: Path):
        downloads = tmp_path / "downloads"
        with patch(
            "xml_studio.agents.assistant.XmlAssistant.convert_to_json",
            new=AsyncMock(return_value='{"catalog": {}}'),
        ):
            result = runner.invoke(
                cli,
                ["json", str(sample_xml_file), "--download"],
                env={"XML_STUDIO_OUTPUT__DOWNLOAD_DIR": str(downloads)},
            )

        assert result.exit_code == 0
        assert "Converted to JSON successfully" in result.output
        assert (downloads / "formatted.json").read_text() == '{"catalog": {}}'

    def test_sample(self, runner: CliRunner, tmp_path: Path):
        output = tmp_path / "sample.xml"
        with patch(
            "xml_studio.agents.assistant.XmlAssistant.generate_sample",
            new=AsyncMock(return_value="<library/>"),
        ):
            result = runner.invoke(cli, ["sample", "-o", str(output)])

        assert result.exit_code == 0
        assert "Sample loaded" in result.output
        assert output.read_text() == "<library/>"
