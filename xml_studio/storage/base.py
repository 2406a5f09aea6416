"""Interfaces for the file and clipboard collaborators."""

from abc import ABC, abstractmethod
from pathlib import Path

# Upload filter, matching the extensions the studio opens as text
ACCEPTED_EXTENSIONS = {".xml", ".txt"}


class FileStore(ABC):
    """Upload/download backend."""

    @abstractmethod
    def read_text(self, path: str | Path) -> str:
        """Read an uploaded file as text.

        Args:
            path: Path to an .xml or .txt file

        Returns:
            File content

        Raises:
            FileInterfaceError: If the file type is not accepted or cannot be read
        """

    @abstractmethod
    def save(
        self,
        content: str,
        filename: str,
        mime_type: str,
        directory: str | Path | None = None,
    ) -> Path:
        """Save downloaded content.

        Args:
            content: Text to write
            filename: Target file name (formatted.xml / formatted.json)
            mime_type: application/xml or application/json. Advisory for
                filesystem stores, which only log it; stores that serve
                the download over a transport use it as the content type
            directory: Optional override for the target directory

        Returns:
            Path of the written file
        """


class Clipboard(ABC):
    """System clipboard."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Place ``text`` on the clipboard."""
