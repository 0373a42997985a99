import httpx
import openai

from structextract.encoding.models import EncodedDocument
from structextract.extraction.client_base import BaseExtractionClient
from structextract.extraction.exceptions import EmptyResultFailure, ServiceFailure

_USER_TEXT = "Extract the column reinforcement schedule from the attached document."


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client built on the OpenAI-compatible async chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        instructions: str,
        document: EncodedDocument,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "reinforcement_schedule",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": instructions},
                    {
                        "role": "user",
                        "content": [
                            self._document_part(document),
                            {"type": "text", "text": _USER_TEXT},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ServiceFailure(f"Extraction service network error: {exc}") from exc
        except openai.APIError as exc:
            raise ServiceFailure(f"Extraction service API error: {exc}") from exc

        if not response.choices:
            raise EmptyResultFailure("No data returned from the model.")
        content = response.choices[0].message.content
        if not content:
            raise EmptyResultFailure("No data returned from the model.")
        return content

    @staticmethod
    def _document_part(document: EncodedDocument) -> dict[str, object]:
        if document.is_pdf:
            return {
                "type": "file",
                "file": {
                    "filename": document.file_name or "document.pdf",
                    "file_data": document.data_url(),
                },
            }
        return {"type": "image_url", "image_url": {"url": document.data_url()}}
