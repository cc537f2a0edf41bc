import base64
import io
from collections.abc import Callable

import pymupdf
import pytest
from PIL import Image
from reportlab.pdfgen import canvas


def _encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@pytest.fixture()
def make_image() -> Callable[..., bytes]:
    """Return a factory producing PNG/JPEG bytes of a given pixel size."""

    def _make(width: int, height: int, fmt: str = "PNG", color: str = "white") -> bytes:
        buf = io.BytesIO()
        Image.new("RGB", (width, height), color).save(buf, format=fmt)
        return buf.getvalue()

    return _make


@pytest.fixture()
def make_pdf() -> Callable[..., bytes]:
    """Return a factory producing a PDF with one labelled page per (label, size)."""

    def _make(*pages: tuple[str, tuple[float, float]]) -> bytes:
        buf = io.BytesIO()
        c = canvas.Canvas(buf)
        for label, size in pages:
            c.setPageSize(size)
            c.drawString(10, 10, label)
            c.showPage()
        c.save()
        return buf.getvalue()

    return _make


@pytest.fixture()
def entry() -> Callable[[str, bytes], dict[str, str]]:
    """Return a factory building one task file entry from a name and raw bytes."""

    def _make(name: str, data: bytes) -> dict[str, str]:
        return {"fileName": name, "fileData": _encode(data)}

    return _make


@pytest.fixture()
def sample_pdf_bytes(make_pdf: Callable[..., bytes]) -> bytes:
    return make_pdf(("Hello PDF World", (612, 792)))


@pytest.fixture()
def multi_page_pdf_bytes(make_pdf: Callable[..., bytes]) -> bytes:
    return make_pdf(("Page one content", (612, 792)), ("Page two content", (300, 400)))


@pytest.fixture()
def read_pages() -> Callable[[bytes], list[tuple[int, int, str]]]:
    """Return a reader giving (width, height, text) for every page of a PDF."""

    def _read(pdf_bytes: bytes) -> list[tuple[int, int, str]]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:
            return [
                (round(p.rect.width), round(p.rect.height), p.get_text().strip())
                for p in doc
            ]

    return _read
