from structextract.encoding.encoder import FileEncoder, encode_bytes, is_supported_media_type
from structextract.encoding.exceptions import EncodingFailure
from structextract.encoding.models import EncodedDocument, SourceFile

__all__ = [
    "EncodedDocument",
    "EncodingFailure",
    "FileEncoder",
    "SourceFile",
    "encode_bytes",
    "is_supported_media_type",
]
