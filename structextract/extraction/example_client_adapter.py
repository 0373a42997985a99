"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from structextract.encoding.models import EncodedDocument
from structextract.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Adapter that answers every document with a fixed record array.

    No network calls. Useful for local development, tests, and as a template
    for real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "records": [
            {
                "columnType": "C1",
                "columnDimensions": "770×770",
                "mainReinforcement": "24-D25 (SD345)",
                "hoopReinforcement": "D13@100 (SD295)",
            },
        ],
    }

    def __init__(self, response: object | None = None) -> None:
        self._response = self.DEFAULT_RESPONSE if response is None else response

    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        instructions: str,
        document: EncodedDocument,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, instructions, document, json_schema
        return json.dumps(self._response, ensure_ascii=False)
