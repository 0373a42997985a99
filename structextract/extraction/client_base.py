from abc import ABC, abstractmethod

from structextract.encoding.models import EncodedDocument


class BaseExtractionClient(ABC):
    """Contract for provider-specific multimodal extraction clients."""

    @abstractmethod
    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        instructions: str,
        document: EncodedDocument,
        json_schema: dict[str, object],
    ) -> str:
        """Return provider response as plain text."""
