"""AI collaborator module.

The studio delegates repair, XML-to-JSON conversion and sample generation to
an OpenAI-compatible chat completion service through these classes.
"""

from xml_studio.agents.assistant import XmlAssistant
from xml_studio.agents.base import BaseAssistant
from xml_studio.agents.llm_client import ChatMessage, LLMConfig, LLMResponse, SimpleLLMClient

__all__ = [
    "BaseAssistant",
    "XmlAssistant",
    "LLMConfig",
    "ChatMessage",
    "LLMResponse",
    "SimpleLLMClient",
]
