"""Tests for the local file store and clipboard."""

from pathlib import Path

import pytest

from xml_studio.exceptions import FileInterfaceError
from xml_studio.models import ViewMode
from xml_studio.storage import ACCEPTED_EXTENSIONS, LocalFileStore, MemoryClipboard


class TestLocalFileStore:
    """Test LocalFileStore."""

    @pytest.fixture
    def store(self, tmp_path: Path) -> LocalFileStore:
        return LocalFileStore(download_dir=tmp_path / "out")

    def test_accepted_extensions(self):
        assert ACCEPTED_EXTENSIONS == {".xml", ".txt"}

    @pytest.mark.parametrize("name", ["data.xml", "data.txt", "DATA.XML"])
    def test_read_accepted(self, store, tmp_path: Path, name: str):
        path = tmp_path / name
        path.write_text("<a/>")
        assert store.read_text(path) == "<a/>"

    @pytest.mark.parametrize("name", ["data.json", "data", "data.xsl"])
    def test_read_rejected(self, store, tmp_path: Path, name: str):
        path = tmp_path / name
        path.write_text("<a/>")
        with pytest.raises(FileInterfaceError) as exc_info:
            store.read_text(path)
        assert "Unsupported file type" in str(exc_info.value)

    def test_read_missing(self, store, tmp_path: Path):
        with pytest.raises(FileInterfaceError):
            store.read_text(tmp_path / "missing.xml")

    def test_save_creates_directory(self, store, tmp_path: Path):
        path = store.save("<a/>", ViewMode.XML.download_name, ViewMode.XML.mime_type)
        assert path == tmp_path / "out" / "formatted.xml"
        assert path.read_text() == "<a/>"

    def test_save_keeps_crlf(self, store):
        path = store.save("<a>\r\n  <b/>\r\n</a>", "formatted.xml", "application/xml")
        assert path.read_bytes() == b"<a>\r\n  <b/>\r\n</a>"

    def test_save_directory_override(self, store, tmp_path: Path):
        path = store.save("{}", "formatted.json", "application/json", directory=tmp_path / "alt")
        assert path == tmp_path / "alt" / "formatted.json"

    def test_mime_type_is_advisory(self, store):
        path = store.save("<a/>", "formatted.xml", "application/json")
        assert path.name == "formatted.xml"
        assert path.read_text() == "<a/>"

    def test_save_failure(self, store, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(FileInterfaceError):
            store.save("<a/>", "formatted.xml", "application/xml", directory=blocker)


class TestViewMode:
    """Download naming follows the view mode."""

    def test_xml(self):
        assert ViewMode.XML.download_name == "formatted.xml"
        assert ViewMode.XML.mime_type == "application/xml"

    def test_json(self):
        assert ViewMode.JSON.download_name == "formatted.json"
        assert ViewMode.JSON.mime_type == "application/json"


def test_memory_clipboard():
    clipboard = MemoryClipboard()
    assert clipboard.content == ""
    clipboard.copy("<a/>")
    assert clipboard.content == "<a/>"
