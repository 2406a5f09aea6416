"""Exception classes for xml_studio."""

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from xml_studio.models import XmlError


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class XmlStudioError(Exception):
    """Base exception class for xml_studio."""

    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception.

        Args:
            message: Error message
            details: Additional error details
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(XmlStudioError):
    """Configuration related errors."""

    severity = ErrorSeverity.FATAL


class ValidationError(XmlStudioError):
    """XML well-formedness errors."""

    severity = ErrorSeverity.WARNING

    def __init__(self, error: "XmlError"):
        self.error = error
        super().__init__(error.message, details={"line": error.line})


class RemoteOperationError(XmlStudioError):
    """AI collaborator call failures."""

    severity = ErrorSeverity.ERROR

    def __init__(
        self,
        operation: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.operation = operation
        super().__init__(f"{operation} failed: {message}", details=details)


class CredentialMissingError(RemoteOperationError):
    """Raised before any network call when no API key is configured."""

    def __init__(self, operation: str):
        super().__init__(operation, "API Key is missing")


class FileInterfaceError(XmlStudioError):
    """Upload/download errors."""

    severity = ErrorSeverity.ERROR
