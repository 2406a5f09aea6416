"""State models shared by the validator and the studio session."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ViewMode(str, Enum):
    """How the current output is labeled and exported."""

    XML = "XML"
    JSON = "JSON"

    @property
    def extension(self) -> str:
        return "json" if self is ViewMode.JSON else "xml"

    @property
    def mime_type(self) -> str:
        return "application/json" if self is ViewMode.JSON else "application/xml"

    @property
    def download_name(self) -> str:
        return f"formatted.{self.extension}"


class StatusType(str, Enum):
    """Outcome of the most recent operation."""

    IDLE = "IDLE"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    LOADING = "LOADING"


class XmlError(BaseModel):
    """Well-formedness failure reported by the validator."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(
        default=0,
        ge=0,
        description="Line number of the failure (0 = unknown)",
    )
    message: str = Field(description="Parser diagnostic with boilerplate removed")


class ProcessingResult(BaseModel):
    """Snapshot of the studio state after an operation."""

    content: str = Field(default="", description="Current output pane text")
    status: StatusType = Field(default=StatusType.IDLE)
    message: str = Field(default="", description="Status line text")
    view_mode: ViewMode = Field(default=ViewMode.XML)
    error: XmlError | None = Field(
        default=None,
        description="Validation error retained by the session, if any",
    )

    @property
    def ok(self) -> bool:
        return self.status is not StatusType.ERROR
