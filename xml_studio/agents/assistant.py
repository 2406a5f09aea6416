"""LLM-backed repair, conversion and sample generation."""

import httpx

from xml_studio.agents.base import BaseAssistant
from xml_studio.agents.llm_client import ChatMessage, LLMConfig, SimpleLLMClient
from xml_studio.core.fences import strip_code_fence
from xml_studio.exceptions import CredentialMissingError, RemoteOperationError
from xml_studio.utils.logger import get_logger

logger = get_logger(__name__)

REPAIR_PROMPT = """Fix the following malformed XML. Return ONLY the corrected XML string without any markdown formatting or explanation.

Broken XML:
{xml}"""

CONVERT_PROMPT = """Convert the following XML to valid JSON. Handle attributes and nested structures intelligently. Return ONLY the JSON string without markdown.

XML:
{xml}"""

SAMPLE_PROMPT = (
    "Generate a complex sample XML document representing a library catalog with books, "
    "authors, and genres. Include at least 3 items with attributes. Return ONLY the XML."
)


class XmlAssistant(BaseAssistant):
    """Sends one prompt per operation to an OpenAI-compatible endpoint."""

    def __init__(
        self,
        config: LLMConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self._transport = transport

    async def _complete(self, operation: str, prompt: str, fence: str) -> str:
        """Run a single-turn completion and unwrap the fenced reply.

        Raises:
            CredentialMissingError: If no API key is configured (no request is sent)
            RemoteOperationError: On transport failure or an unusable response
        """
        if not self.config.api_key:
            raise CredentialMissingError(operation)

        logger.info(f"Requesting {operation} from {self.config.model}")

        try:
            async with SimpleLLMClient(self.config, transport=self._transport) as client:
                response = await client.chat([ChatMessage(role="user", content=prompt)])
        except httpx.HTTPStatusError as e:
            raise RemoteOperationError(
                operation,
                f"HTTP {e.response.status_code}",
                details={"url": str(e.request.url)},
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise RemoteOperationError(operation, str(e) or type(e).__name__) from e
        except (KeyError, TypeError, AttributeError) as e:
            logger.exception(f"Unexpected response while requesting {operation}")
            raise RemoteOperationError(operation, f"malformed response ({type(e).__name__})") from e

        if response.is_error:
            raise RemoteOperationError(operation, response.content or "empty response")

        return strip_code_fence(response.content, fence)

    async def repair(self, broken_xml: str) -> str:
        return await self._complete("repair", REPAIR_PROMPT.format(xml=broken_xml), "xml")

    async def convert_to_json(self, xml: str) -> str:
        return await self._complete("convert to JSON", CONVERT_PROMPT.format(xml=xml), "json")

    async def generate_sample(self) -> str:
        return await self._complete("generate sample", SAMPLE_PROMPT, "xml")
