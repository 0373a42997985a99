import mimetypes
from dataclasses import dataclass
from pathlib import Path

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class SourceFile:
    """A user-selected document waiting to be submitted."""

    name: str
    media_type: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "SourceFile":
        """Build a SourceFile, guessing the media type from the file suffix."""
        media_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            media_type=media_type or _FALLBACK_MEDIA_TYPE,
            path=path,
        )


@dataclass(frozen=True)
class EncodedDocument:
    """Base64 payload of one document, ready to embed in a request."""

    data: str
    media_type: str
    file_name: str = ""

    def data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"

    @property
    def is_pdf(self) -> bool:
        return self.media_type == "application/pdf"
