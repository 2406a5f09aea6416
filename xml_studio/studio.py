"""Studio session: the stateful layer between user actions and the XML engine.

Local operations (validate, format, minify) run synchronously and move the
status straight to SUCCESS or ERROR. Remote operations (repair, convert,
generate) pass through LOADING and are the only suspension points.
"""

from pathlib import Path

from xml_studio.agents.base import BaseAssistant
from xml_studio.config import Settings
from xml_studio.core.formatter import format_xml, minify_xml
from xml_studio.core.validator import validate_xml
from xml_studio.exceptions import ConfigurationError
from xml_studio.models import ProcessingResult, StatusType, ViewMode, XmlError
from xml_studio.storage.base import Clipboard, FileStore
from xml_studio.utils.logger import get_logger

logger = get_logger(__name__)

OP_REPAIR = "repair"
OP_CONVERT = "convert"
OP_GENERATE = "generate"


class XmlStudio:
    """Holds the input/output panes, status line and last validation error.

    Collaborators are injected so the session runs without any UI host:

    Usage:
        studio = XmlStudio(assistant=XmlAssistant(config))
        studio.set_input("<a><b>1</b></a>")
        result = studio.format()
        print(result.content)
    """

    def __init__(
        self,
        assistant: BaseAssistant | None = None,
        file_store: FileStore | None = None,
        clipboard: Clipboard | None = None,
    ):
        """Initialize session.

        Args:
            assistant: AI collaborator for repair/convert/generate
            file_store: Upload/download backend
            clipboard: Clipboard backend
        """
        self.assistant = assistant
        self.file_store = file_store
        self.clipboard = clipboard

        self.input_xml = ""
        self.output_content = ""
        self.status = StatusType.IDLE
        self.message = ""
        self.view_mode = ViewMode.XML
        self.validation_error: XmlError | None = None

        self._in_flight: set[str] = set()

    @classmethod
    def from_settings(cls, settings: Settings, clipboard: Clipboard | None = None) -> "XmlStudio":
        """Build a session wired to the configured LLM endpoint and download dir."""
        from xml_studio.agents import LLMConfig, XmlAssistant
        from xml_studio.storage import LocalFileStore

        return cls(
            assistant=XmlAssistant(LLMConfig.from_settings(settings.llm)),
            file_store=LocalFileStore(
                download_dir=settings.get_download_dir(),
                encoding=settings.output.encoding,
            ),
            clipboard=clipboard,
        )

    # State helpers

    def snapshot(self) -> ProcessingResult:
        return ProcessingResult(
            content=self.output_content,
            status=self.status,
            message=self.message,
            view_mode=self.view_mode,
            error=self.validation_error,
        )

    def _set_status(self, status: StatusType, message: str) -> None:
        self.status = status
        self.message = message
        if status is StatusType.ERROR:
            logger.warning(message)
        else:
            logger.info(message)

    def _has_input(self) -> bool:
        return bool(self.input_xml.strip())

    @property
    def can_repair(self) -> bool:
        """Repair is offered only for empty input or input that failed validation."""
        return self.validation_error is not None or not self.input_xml

    def is_busy(self, operation: str) -> bool:
        return operation in self._in_flight

    def set_input(self, text: str) -> None:
        self.input_xml = text

    # Local operations

    def validate(self) -> ProcessingResult:
        """Validate the input pane without transforming it."""
        error = validate_xml(self.input_xml)
        self.validation_error = error

        if error:
            self._set_status(StatusType.ERROR, f"Invalid XML: {error.message}")
        else:
            self._set_status(StatusType.SUCCESS, "XML is well-formed")
        return self.snapshot()

    def format(self) -> ProcessingResult:
        """Validate, then pretty-print the input into the output pane."""
        if not self._has_input():
            return self.snapshot()

        error = validate_xml(self.input_xml)
        self.validation_error = error

        if error:
            self._set_status(StatusType.ERROR, f"Invalid XML: {error.message}")
            return self.snapshot()

        try:
            formatted = format_xml(self.input_xml)
        except Exception:
            logger.exception("Formatter raised on validated input")
            self._set_status(StatusType.ERROR, "Formatting failed")
            return self.snapshot()

        self.output_content = formatted
        self.view_mode = ViewMode.XML
        self._set_status(StatusType.SUCCESS, "XML formatted successfully")
        return self.snapshot()

    def minify(self) -> ProcessingResult:
        """Validate, then collapse inter-tag whitespace into the output pane."""
        if not self._has_input():
            return self.snapshot()

        error = validate_xml(self.input_xml)
        if error:
            self.validation_error = error
            self._set_status(StatusType.ERROR, "Cannot minify invalid XML")
            return self.snapshot()

        self.validation_error = None
        self.output_content = minify_xml(self.input_xml)
        self.view_mode = ViewMode.XML
        self._set_status(StatusType.SUCCESS, "XML minified")
        return self.snapshot()

    # Remote operations

    def _require_assistant(self) -> BaseAssistant:
        if self.assistant is None:
            raise ConfigurationError("No AI assistant configured for this session")
        return self.assistant

    def _begin(self, operation: str, message: str) -> bool:
        """Mark ``operation`` in flight; False when one is already pending."""
        if operation in self._in_flight:
            logger.warning(f"Ignoring {operation}: a request is already in flight")
            return False
        self._in_flight.add(operation)
        self._set_status(StatusType.LOADING, message)
        return True

    async def repair(self) -> ProcessingResult:
        """Ask the assistant to fix the input, then format the fixed version.

        Well-formed input is never sent: the validation error is refreshed and,
        when there is none, the snapshot is returned unchanged.
        """
        if not self._has_input():
            return self.snapshot()

        self.validation_error = validate_xml(self.input_xml)
        if not self.can_repair:
            logger.info("Skipping repair: input is already well-formed")
            return self.snapshot()

        assistant = self._require_assistant()
        if not self._begin(OP_REPAIR, "AI is analyzing and repairing your XML..."):
            return self.snapshot()

        try:
            fixed = await assistant.repair(self.input_xml)
        except Exception as e:
            logger.error(f"Repair failed: {e}")
            self._set_status(StatusType.ERROR, "AI Repair failed. Please check your API Key.")
            return self.snapshot()
        finally:
            self._in_flight.discard(OP_REPAIR)

        self.input_xml = fixed
        self.output_content = format_xml(fixed)
        self.validation_error = None
        self._set_status(StatusType.SUCCESS, "XML repaired by AI")
        return self.snapshot()

    async def convert_to_json(self) -> ProcessingResult:
        """Ask the assistant for a JSON rendering of the input."""
        if not self._has_input():
            return self.snapshot()

        assistant = self._require_assistant()
        if not self._begin(OP_CONVERT, "AI is converting XML to JSON..."):
            return self.snapshot()

        try:
            converted = await assistant.convert_to_json(self.input_xml)
        except Exception as e:
            logger.error(f"Conversion failed: {e}")
            self._set_status(StatusType.ERROR, "Conversion failed")
            return self.snapshot()
        finally:
            self._in_flight.discard(OP_CONVERT)

        self.output_content = converted
        self.view_mode = ViewMode.JSON
        self._set_status(StatusType.SUCCESS, "Converted to JSON successfully")
        return self.snapshot()

    async def generate_sample(self) -> ProcessingResult:
        """Replace the input with an AI-generated sample document."""
        assistant = self._require_assistant()
        if not self._begin(OP_GENERATE, "Generating sample data..."):
            return self.snapshot()

        try:
            sample = await assistant.generate_sample()
        except Exception as e:
            logger.error(f"Sample generation failed: {e}")
            self._set_status(StatusType.ERROR, "Failed to generate sample")
            return self.snapshot()
        finally:
            self._in_flight.discard(OP_GENERATE)

        self.input_xml = sample
        self.output_content = ""
        self.validation_error = None
        self._set_status(StatusType.IDLE, "Sample loaded")
        return self.snapshot()

    # File and clipboard

    def _require_file_store(self) -> FileStore:
        if self.file_store is None:
            raise ConfigurationError("No file store configured for this session")
        return self.file_store

    def load_file(self, path: str | Path) -> ProcessingResult:
        """Load an .xml/.txt file into the input pane.

        Well-formed content is formatted into the output pane right away; the
        status line is left as it was.

        Raises:
            FileInterfaceError: If the file is rejected or unreadable
        """
        content = self._require_file_store().read_text(path)
        self.input_xml = content

        if validate_xml(content) is None:
            self.output_content = format_xml(content)
        return self.snapshot()

    def download(self, directory: str | Path | None = None) -> Path | None:
        """Save the output pane as formatted.xml or formatted.json.

        Returns:
            Path of the written file, or None when there is no output
        """
        if not self.output_content:
            return None

        path = self._require_file_store().save(
            self.output_content,
            self.view_mode.download_name,
            self.view_mode.mime_type,
            directory=directory,
        )
        self._set_status(StatusType.SUCCESS, f"Saved {path.name}")
        return path

    def _require_clipboard(self) -> Clipboard:
        if self.clipboard is None:
            raise ConfigurationError("No clipboard configured for this session")
        return self.clipboard

    def copy_input(self) -> None:
        self._require_clipboard().copy(self.input_xml)

    def copy_output(self) -> None:
        self._require_clipboard().copy(self.output_content)
