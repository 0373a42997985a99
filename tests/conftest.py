import io
import os
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

# 1x1 transparent PNG.
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d00000000"
    "49454e44ae426082"
)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a single-page PDF resembling a column schedule sheet."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 760, "EB-101 Foundation Column Design Example")
    c.drawString(72, 740, "C1: 770x770  Main 24-D25 (SD345)  Hoop D13@100 (SD295)")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture()
def pdf_file(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "schedule.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture()
def png_file(tmp_path: Path, sample_png_bytes: bytes) -> Path:
    path = tmp_path / "scan.png"
    path.write_bytes(sample_png_bytes)
    return path


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host EXTRACTION_* variables from leaking into Settings()."""
    for name in list(os.environ):
        if name.upper().startswith(("EXTRACTION_", "MAX_CONCURRENT_")) or name.upper() in (
            "LOG_LEVEL",
            "APP_ENV",
        ):
            monkeypatch.delenv(name, raising=False)
