"""XML Studio - XML Formatter & AI Tools

Formats, minifies and validates XML locally, and delegates repair,
XML-to-JSON conversion and sample generation to an LLM service.
"""

__version__ = "0.1.0"
__author__ = "XML Studio Team"
