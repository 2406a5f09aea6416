"""File and clipboard collaborators."""

from xml_studio.storage.base import ACCEPTED_EXTENSIONS, Clipboard, FileStore
from xml_studio.storage.files import LocalFileStore, MemoryClipboard

__all__ = [
    "ACCEPTED_EXTENSIONS",
    "FileStore",
    "Clipboard",
    "LocalFileStore",
    "MemoryClipboard",
]
