"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from xml_studio.agents.base import BaseAssistant
from xml_studio.config import reset_settings
from xml_studio.exceptions import RemoteOperationError
from xml_studio.utils.logger import setup_logger

CREDENTIAL_ENV_VARS = ("XML_STUDIO_LLM__API_KEY", "GEMINI_API_KEY", "API_KEY", "XML_STUDIO_CONFIG")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep host credentials and cached settings out of every test."""
    for var in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    setup_logger(log_level="WARNING")
    yield
    reset_settings()


class FakeAssistant(BaseAssistant):
    """Scripted AI collaborator recording every call."""

    def __init__(
        self,
        repaired: str = "<a><b>1</b></a>",
        json_text: str = '{"a": {"b": "1"}}',
        sample: str = "<library><book id=\"1\"/></library>",
        error: Exception | None = None,
        gate=None,
    ):
        self.repaired = repaired
        self.json_text = json_text
        self.sample = sample
        self.error = error
        self.gate = gate
        self.calls: list[str] = []

    async def _answer(self, operation: str, value: str) -> str:
        self.calls.append(operation)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return value

    async def repair(self, broken_xml: str) -> str:
        return await self._answer("repair", self.repaired)

    async def convert_to_json(self, xml: str) -> str:
        return await self._answer("convert", self.json_text)

    async def generate_sample(self) -> str:
        return await self._answer("generate", self.sample)


@pytest.fixture
def assistant_factory() -> type[FakeAssistant]:
    """The FakeAssistant class, for tests that need custom answers."""
    return FakeAssistant


@pytest.fixture
def fake_assistant() -> FakeAssistant:
    """Assistant that answers every operation successfully."""
    return FakeAssistant()


@pytest.fixture
def failing_assistant() -> FakeAssistant:
    """Assistant whose every operation fails."""
    return FakeAssistant(error=RemoteOperationError("test", "service unavailable"))


@pytest.fixture
def sample_xml_file(tmp_path: Path) -> Path:
    """Create a well-formed XML file with loose whitespace."""
    xml_file = tmp_path / "catalog.xml"
    xml_file.write_text("""<catalog>
    <book id="1">
        <title>Dune</title>
    </book>
    <book id="2"/>
</catalog>
""")
    return xml_file


@pytest.fixture
def broken_xml_file(tmp_path: Path) -> Path:
    """Create a malformed XML file."""
    xml_file = tmp_path / "broken.xml"
    xml_file.write_text("<catalog><book></catalog>")
    return xml_file


@pytest.fixture
def sample_config(tmp_path: Path) -> Path:
    """Create a sample configuration file."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(f"""
version: "1.0"

llm:
  base_url: "http://localhost:11434/v1"
  model: "test-model"
  api_key: "test-key"

output:
  download_dir: "{(tmp_path / 'downloads').as_posix()}"
""")
    return config_file
