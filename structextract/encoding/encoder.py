"""Base64 transport encoding for uploaded documents."""

import asyncio
import base64

from structextract.encoding.exceptions import EncodingFailure
from structextract.encoding.models import EncodedDocument, SourceFile

SUPPORTED_MEDIA_TYPES = frozenset({"application/pdf"})


def is_supported_media_type(media_type: str) -> bool:
    """Return True for PDFs and any image/* media type."""
    return media_type in SUPPORTED_MEDIA_TYPES or media_type.startswith("image/")


def encode_bytes(data: bytes, media_type: str, file_name: str = "") -> EncodedDocument:
    """Encode raw file content as base64 text.

    Raises:
        EncodingFailure: if there is nothing to encode.
    """
    if not data:
        raise EncodingFailure(f"File '{file_name}' is empty and cannot be encoded")
    encoded = base64.b64encode(data).decode("ascii")
    return EncodedDocument(data=encoded, media_type=media_type, file_name=file_name)


class FileEncoder:
    """Reads a source file once and produces its base64 payload."""

    def encode(self, source: SourceFile) -> EncodedDocument:
        """Read and encode a file. Never retries.

        Raises:
            EncodingFailure: if the file cannot be read or is empty.
        """
        try:
            data = source.path.read_bytes()
        except OSError as exc:
            raise EncodingFailure(f"Failed to read '{source.name}': {exc}") from exc
        return encode_bytes(data, source.media_type, source.name)

    async def encode_async(self, source: SourceFile) -> EncodedDocument:
        return await asyncio.to_thread(self.encode, source)
