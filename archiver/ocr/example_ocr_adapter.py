"""Offline OCR adapter.

Returns a fixed transcription without any network call. Used for local
development and tests, and as a template for new provider adapters.
"""

from archiver.ocr.base import BaseOcrClient
from archiver.ocr.models import OcrResult, parse_ocr_response


class ExampleOcrAdapter(BaseOcrClient):
    DEFAULT_RESPONSE = (
        "---\n"
        "created: '1970-01-01'\n"
        "description: Placeholder transcription.\n"
        "published: Unknown\n"
        "summary: Placeholder transcription.\n"
        "tags:\n"
        "  - example\n"
        "title: Example Document\n"
        "---\n"
        "\n"
        "Example body text.\n"
        "|||||"
        "Example Document"
    )

    def __init__(self, response: str | None = None) -> None:
        self._response = response or self.DEFAULT_RESPONSE

    def transcribe(self, pdf_bytes: bytes, excluded_titles: list[str]) -> OcrResult:
        _ = pdf_bytes, excluded_titles
        return parse_ocr_response(self._response)
