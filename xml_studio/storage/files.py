"""Local filesystem implementations of the file and clipboard interfaces."""

from pathlib import Path

from xml_studio.exceptions import FileInterfaceError
from xml_studio.storage.base import ACCEPTED_EXTENSIONS, Clipboard, FileStore
from xml_studio.utils.logger import get_logger

logger = get_logger(__name__)


class LocalFileStore(FileStore):
    """Reads uploads from and writes downloads to the local filesystem."""

    def __init__(self, download_dir: str | Path = ".", encoding: str = "utf-8"):
        """Initialize store.

        Args:
            download_dir: Default directory for downloads
            encoding: Text encoding for reads and writes
        """
        self.download_dir = Path(download_dir)
        self.encoding = encoding

    def read_text(self, path: str | Path) -> str:
        file_path = Path(path)

        if file_path.suffix.lower() not in ACCEPTED_EXTENSIONS:
            raise FileInterfaceError(
                f"Unsupported file type: {file_path.suffix or '(none)'}",
                details={"accepted": sorted(ACCEPTED_EXTENSIONS)},
            )

        try:
            with open(file_path, encoding=self.encoding) as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileInterfaceError(f"Failed to read file: {e}", details={"path": str(file_path)}) from e

        logger.debug(f"Loaded {len(content)} characters from {file_path}")
        return content

    def save(
        self,
        content: str,
        filename: str,
        mime_type: str,
        directory: str | Path | None = None,
    ) -> Path:
        target_dir = Path(directory) if directory is not None else self.download_dir
        target = target_dir / filename

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            with open(target, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except OSError as e:
            raise FileInterfaceError(f"Failed to write file: {e}", details={"path": str(target)}) from e

        logger.info(f"Saved {target} ({mime_type})")
        return target


class MemoryClipboard(Clipboard):
    """Process-local clipboard for headless use."""

    def __init__(self) -> None:
        self.content = ""

    def copy(self, text: str) -> None:
        self.content = text
