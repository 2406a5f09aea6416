"""XML well-formedness validator.

Parses the document with a generic (non-HTML, non-recovering) lxml parser and
turns the parser diagnostic into an :class:`~xml_studio.models.XmlError`.
"""

import re
from pathlib import Path

from lxml import etree

from xml_studio.exceptions import FileInterfaceError, ValidationError
from xml_studio.models import XmlError
from xml_studio.utils.logger import get_logger

logger = get_logger(__name__)

ERROR_BOILERPLATE = "This page contains the following errors:"

_LINE_PATTERN = re.compile(r"line\s+(\d+)", re.IGNORECASE)


def _new_parser() -> etree.XMLParser:
    """Create a fresh parser; instances are never shared between calls.

    The text reaching the validator is already decoded, so the parser always
    reads UTF-8 and any encoding named in the XML declaration is ignored.
    """
    return etree.XMLParser(
        encoding="utf-8",
        recover=False,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
    )


def describe_failure(diagnostic: str) -> XmlError:
    """Build an XmlError from free-form parser diagnostic text.

    The line number is a best-effort heuristic: the first "line N" in the text,
    or 0 when there is none.
    """
    match = _LINE_PATTERN.search(diagnostic)
    return XmlError(
        line=int(match.group(1)) if match else 0,
        message=diagnostic.replace(ERROR_BOILERPLATE, "").strip(),
    )


def validate_xml(xml: str) -> XmlError | None:
    """Check that ``xml`` is accepted by a generic XML parser.

    Args:
        xml: XML document text

    Returns:
        None when the parser accepts the document, otherwise an XmlError with
        the cleaned diagnostic and the line number found in it
    """
    try:
        # Bytes, since lxml refuses str input that carries an encoding declaration
        etree.fromstring(xml.encode("utf-8"), _new_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        error = describe_failure(str(e) or "Unknown parsing error")
        logger.debug(f"XML rejected at line {error.line}: {error.message}")
        return error

    return None


class XMLValidator:
    """Object wrapper around :func:`validate_xml` for API callers."""

    def validate(self, xml_content: str) -> XmlError | None:
        return validate_xml(xml_content)

    def ensure_valid(self, xml_content: str) -> None:
        """Raise ValidationError when the document is not well-formed."""
        error = validate_xml(xml_content)
        if error is not None:
            raise ValidationError(error)

    def validate_file(self, file_path: str | Path, encoding: str = "utf-8") -> XmlError | None:
        """Validate an XML file.

        Raises:
            FileInterfaceError: If the file cannot be read
        """
        try:
            with open(file_path, encoding=encoding) as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileInterfaceError(f"Failed to read file: {e}", details={"path": str(file_path)}) from e
        return self.validate(content)
