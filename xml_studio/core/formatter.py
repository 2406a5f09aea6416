"""Line-oriented XML pretty-printer and minifier.

Neither function validates its input. Callers are expected to run
:func:`xml_studio.core.validator.validate_xml` first and refuse to transform
a document that fails.
"""

from xml_studio.core.tokenizer import normalize_xml, tokenize
from xml_studio.utils.logger import get_logger

logger = get_logger(__name__)

INDENT_UNIT = "  "
LINE_TERMINATOR = "\r\n"


def format_xml(xml: str) -> str:
    """Re-indent ``xml`` with one tag per line.

    Every line is ``indent + "<" + token + ">"`` followed by CRLF. Closing tags
    step the depth back before they are written; opening tags step it forward
    after. Self-closing tags, declarations and comments keep the current depth.

    The accumulated text is trimmed by one character at the front (the first
    token still carries its ``<``) and three at the back (the last token still
    carries its ``>``, plus the final CRLF), so the result has no trailing line
    terminator.

    Args:
        xml: Well-formed XML text

    Returns:
        Indented XML using CRLF line endings
    """
    lines: list[str] = []
    depth = 0

    for token in tokenize(xml):
        if token.is_closing:
            if depth == 0:
                # Unbalanced input that slipped past validation; indent stays flat
                logger.debug(f"Closing tag <{token.raw}> at depth 0")
            else:
                depth -= 1

        lines.append(f"{INDENT_UNIT * depth}<{token.raw}>{LINE_TERMINATOR}")

        if token.opens_element:
            depth += 1

    formatted = "".join(lines)
    return formatted[1 : len(formatted) - 3]


def minify_xml(xml: str) -> str:
    """Remove whitespace between tags and trim the document."""
    return normalize_xml(xml)
