"""Data models module."""

from xml_studio.models.studio import ProcessingResult, StatusType, ViewMode, XmlError

__all__ = [
    "ViewMode",
    "StatusType",
    "XmlError",
    "ProcessingResult",
]
