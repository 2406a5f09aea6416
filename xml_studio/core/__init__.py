"""Local XML engine: tokenizer, validator, formatter and minifier."""

from xml_studio.core.fences import strip_code_fence
from xml_studio.core.formatter import format_xml, minify_xml
from xml_studio.core.tokenizer import TagToken, normalize_xml, split_tags, tokenize
from xml_studio.core.validator import XMLValidator, validate_xml

__all__ = [
    "TagToken",
    "normalize_xml",
    "split_tags",
    "tokenize",
    "validate_xml",
    "XMLValidator",
    "format_xml",
    "minify_xml",
    "strip_code_fence",
]
