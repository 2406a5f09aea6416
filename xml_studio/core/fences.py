"""Markdown code fence removal for LLM responses."""

import re


def strip_code_fence(text: str, language: str = "xml") -> str:
    """Unwrap a response the model wrapped in a fenced code block.

    A leading ```` ```<language> ```` fence is preferred; a bare ```` ``` ````
    fence is handled otherwise. Only a fence at the very start and its
    counterpart at the very end are removed, then the text is trimmed.

    Args:
        text: Raw model output
        language: Expected fence language tag ("xml" or "json")

    Returns:
        The unwrapped, trimmed text
    """
    if not text:
        return ""

    if text.startswith(f"```{language}"):
        text = re.sub(rf"^```{re.escape(language)}\n", "", text, count=1)
        text = re.sub(r"\n```\Z", "", text, count=1)
    elif text.startswith("```"):
        text = re.sub(r"^```\n", "", text, count=1)
        text = re.sub(r"\n```\Z", "", text, count=1)

    return text.strip()
