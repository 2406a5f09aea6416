"""AI collaborator interface used by the studio session."""

from abc import ABC, abstractmethod


class BaseAssistant(ABC):
    """Remote operations the studio delegates to a text generation service.

    Implementations return plain text with any markdown code fence already
    removed, and raise :class:`~xml_studio.exceptions.RemoteOperationError`
    on failure.
    """

    @abstractmethod
    async def repair(self, broken_xml: str) -> str:
        """Return a corrected version of ``broken_xml``."""

    @abstractmethod
    async def convert_to_json(self, xml: str) -> str:
        """Return a JSON rendering of ``xml``."""

    @abstractmethod
    async def generate_sample(self) -> str:
        """Return an illustrative multi-record XML document."""
