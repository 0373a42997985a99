from abc import ABC, abstractmethod

from structextract.encoding.models import EncodedDocument
from structextract.extraction.models import ExtractionRecord


class BaseExtractor(ABC):
    """Contract for all reinforcement-schedule extractors."""

    @abstractmethod
    async def extract(self, document: EncodedDocument) -> list[ExtractionRecord]:
        """Extract column reinforcement records from one encoded document.

        Args:
            document: Base64 payload and media type of a PDF or image.

        Returns:
            Records in the order the service returned them, with
            reinforcement strings normalized.

        Raises:
            ServiceFailure: if the service call fails.
            EmptyResultFailure: if the response holds no valid record array.
        """
