"""Tag tokenizer for the line-oriented formatter.

The document is never parsed into a tree. Inter-tag whitespace is removed and
the text is cut at every ``><`` boundary, so each token is the raw text of one
tag (plus any text content that follows it up to the next tag).
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

INTER_TAG_WHITESPACE = re.compile(r">\s+<")
TAG_BOUNDARY = re.compile(r">\s*<")

_CLOSING = re.compile(r"^/\w", re.ASCII)
# A bare single-character name ("b", "<a") also opens an element
_OPENING = re.compile(r"^<?\w(?:[^>]*[^/])?\Z", re.ASCII)


def normalize_xml(xml: str) -> str:
    """Drop whitespace between tags and trim the document."""
    return INTER_TAG_WHITESPACE.sub("><", xml).strip()


def split_tags(xml: str) -> list[str]:
    """Split a document into raw tag pieces.

    The first piece keeps its leading ``<`` and the last piece keeps its
    trailing ``>``. Input without any boundary yields a single piece.
    """
    return TAG_BOUNDARY.split(normalize_xml(xml))


@dataclass(frozen=True)
class TagToken:
    """Raw text of one tag occurrence, classified on demand."""

    raw: str

    @property
    def is_closing(self) -> bool:
        """``</name ...``"""
        return _CLOSING.match(self.raw) is not None

    @property
    def _body(self) -> str:
        # The first token of a document still carries its "<"
        return self.raw[1:] if self.raw.startswith("<") else self.raw

    @property
    def is_declaration(self) -> bool:
        """``<?xml ...?>`` and other processing instructions."""
        return self._body.startswith("?")

    @property
    def is_markup_declaration(self) -> bool:
        """Comments, doctypes and CDATA sections."""
        return self._body.startswith("!")

    @property
    def is_self_closing(self) -> bool:
        # The last token of a document still carries its ">"
        return self.raw.removesuffix(">").endswith("/")

    @property
    def opens_element(self) -> bool:
        """True when the token starts a new nesting level."""
        if self.is_declaration or self.is_markup_declaration:
            return False
        return _OPENING.match(self.raw) is not None


def tokenize(xml: str) -> Iterator[TagToken]:
    """Yield tag tokens in document order."""
    for piece in split_tags(xml):
        yield TagToken(piece)
