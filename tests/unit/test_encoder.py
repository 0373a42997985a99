import base64
from pathlib import Path

import pytest

from structextract.encoding.encoder import FileEncoder, encode_bytes, is_supported_media_type
from structextract.encoding.exceptions import EncodingFailure
from structextract.encoding.models import EncodedDocument, SourceFile


class TestEncodeBytes:
    def test_returns_base64_payload(self) -> None:
        doc = encode_bytes(b"%PDF-1.4 body", "application/pdf", "a.pdf")
        assert base64.b64decode(doc.data) == b"%PDF-1.4 body"
        assert doc.media_type == "application/pdf"
        assert doc.file_name == "a.pdf"

    def test_payload_is_ascii_text(self) -> None:
        doc = encode_bytes(bytes(range(256)), "image/png")
        doc.data.encode("ascii")

    def test_empty_content_raises(self) -> None:
        with pytest.raises(EncodingFailure, match="empty"):
            encode_bytes(b"", "application/pdf", "blank.pdf")


class TestFileEncoder:
    def test_encodes_pdf_file(self, pdf_file: Path, sample_pdf_bytes: bytes) -> None:
        doc = FileEncoder().encode(SourceFile.from_path(pdf_file))
        assert base64.b64decode(doc.data) == sample_pdf_bytes
        assert doc.media_type == "application/pdf"
        assert doc.file_name == "schedule.pdf"

    def test_encodes_image_file(self, png_file: Path, sample_png_bytes: bytes) -> None:
        doc = FileEncoder().encode(SourceFile.from_path(png_file))
        assert base64.b64decode(doc.data) == sample_png_bytes
        assert doc.media_type == "image/png"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        source = SourceFile(name="gone.pdf", media_type="application/pdf", path=tmp_path / "gone.pdf")
        with pytest.raises(EncodingFailure, match="Failed to read 'gone.pdf'"):
            FileEncoder().encode(source)

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.pdf"
        path.write_bytes(b"")
        with pytest.raises(EncodingFailure, match="empty"):
            FileEncoder().encode(SourceFile.from_path(path))

    @pytest.mark.asyncio
    async def test_encode_async_matches_sync(self, pdf_file: Path) -> None:
        encoder = FileEncoder()
        source = SourceFile.from_path(pdf_file)
        assert await encoder.encode_async(source) == encoder.encode(source)


class TestEncodedDocument:
    def test_data_url(self) -> None:
        doc = EncodedDocument(data="QUJD", media_type="image/jpeg")
        assert doc.data_url() == "data:image/jpeg;base64,QUJD"

    def test_is_pdf(self) -> None:
        assert EncodedDocument(data="x", media_type="application/pdf").is_pdf
        assert not EncodedDocument(data="x", media_type="image/png").is_pdf


class TestSourceFileFromPath:
    def test_guesses_pdf(self) -> None:
        assert SourceFile.from_path(Path("/x/plan.pdf")).media_type == "application/pdf"

    def test_guesses_jpeg(self) -> None:
        assert SourceFile.from_path(Path("/x/plan.jpg")).media_type == "image/jpeg"

    def test_unknown_suffix_falls_back(self) -> None:
        source = SourceFile.from_path(Path("/x/plan.zzz-unknown"))
        assert source.media_type == "application/octet-stream"
        assert source.name == "plan.zzz-unknown"


class TestSupportedMediaTypes:
    @pytest.mark.parametrize("media_type", ["application/pdf", "image/png", "image/jpeg", "image/webp"])
    def test_accepts_pdf_and_images(self, media_type: str) -> None:
        assert is_supported_media_type(media_type)

    @pytest.mark.parametrize("media_type", ["text/plain", "application/zip", "application/octet-stream"])
    def test_rejects_other_types(self, media_type: str) -> None:
        assert not is_supported_media_type(media_type)
