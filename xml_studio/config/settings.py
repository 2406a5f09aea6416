"""Configuration settings models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class LLMSettings(BaseModel):
    """LLM service configuration."""

    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai",
        description="OpenAI-compatible API base URL",
    )
    api_key: str | None = Field(
        default=None,
        description="API key for LLM service",
    )
    model: str = Field(
        default="gemini-2.5-flash",
        description="Model name to use",
    )
    temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
        description="Generation temperature (0.0-2.0)",
    )
    max_tokens: int = Field(
        default=8192,
        ge=1,
        description="Maximum tokens in response",
    )
    timeout: int = Field(
        default=120,
        ge=1,
        description="Request timeout in seconds",
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level",
    )
    file: str | None = Field(
        default=None,
        description="Log file path",
    )
    rotation: str = Field(
        default="10 MB",
        description="Log rotation size",
    )
    retention: str = Field(
        default="7 days",
        description="Log retention period",
    )
    compression: bool = Field(
        default=True,
        description="Whether to compress old logs",
    )
    console_format: str | None = Field(
        default=None,
        description="Console log format (None for the built-in format)",
    )


class OutputSettings(BaseModel):
    """Download configuration."""

    download_dir: str = Field(
        default=".",
        description="Directory that receives formatted.xml / formatted.json",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding for uploaded and downloaded files",
    )


class Settings(BaseModel):
    """Main configuration settings."""

    version: str = Field(
        default="1.0",
        description="Configuration version",
    )
    llm: LLMSettings = Field(default_factory=LLMSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate configuration version."""
        supported_versions = ["1.0"]
        if v not in supported_versions:
            raise ValueError(f"Unsupported config version: {v}. Supported: {supported_versions}")
        return v

    def get_download_dir(self) -> Path:
        """Get the download directory as Path."""
        return Path(self.output.download_dir)
