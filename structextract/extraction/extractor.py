"""AI-powered reinforcement schedule extractor."""

import json
from pathlib import Path

from structextract.encoding.models import EncodedDocument
from structextract.extraction.base import BaseExtractor
from structextract.extraction.client_base import BaseExtractionClient
from structextract.extraction.exceptions import EmptyResultFailure
from structextract.extraction.models import ExtractionRecord
from structextract.extraction.prompt_loader import load_instructions, load_json_schema
from structextract.extraction.validator import validate_and_build
from structextract.logging.logger import Log


class Extractor(BaseExtractor):
    """Extracts column reinforcement records from a document via an AI provider.

    Instructions and schema are injected (or loaded from the bundled files) so
    tests can swap in a canned client without touching the network.
    """

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        instructions: str | None = None,
        json_schema: dict[str, object] | None = None,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._instructions = (
            instructions if instructions is not None
            else load_instructions(prompt_template_path)
        )
        self._json_schema = (
            json_schema if json_schema is not None
            else json.loads(load_json_schema(json_schema_path))
        )

    async def extract(self, document: EncodedDocument) -> list[ExtractionRecord]:
        Log.debug(f"Extraction instructions:\n{self._instructions}")
        raw_response = await self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            instructions=self._instructions,
            document=document,
            json_schema=self._json_schema,
        )
        Log.debug(f"AI raw response for {document.file_name}:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        records = validate_and_build(parsed)

        Log.info(f"Extraction complete for {document.file_name}: {len(records)} records")
        return records

    @staticmethod
    def _parse_json(raw: str) -> object:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines).strip()

        if not cleaned:
            raise EmptyResultFailure("No data returned from the model.")
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise EmptyResultFailure(f"Invalid JSON response: {exc}") from exc
