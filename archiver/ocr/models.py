from dataclasses import dataclass

from archiver.ocr.exceptions import OcrResponseError

RESPONSE_SEPARATOR = "|||||"


@dataclass(frozen=True)
class OcrResult:
    """Markdown transcription of a document plus the title the model chose."""

    markdown: str
    title: str


def _strip_fences(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines).strip()
    return cleaned


def parse_ocr_response(raw: str) -> OcrResult:
    """Split a ``<markdown>|||||<title>`` model response.

    Raises:
        OcrResponseError: if the separator is missing or either part is empty.
    """
    if RESPONSE_SEPARATOR not in raw:
        raise OcrResponseError("OCR response is missing the markdown/title separator")
    markdown, _, title = raw.partition(RESPONSE_SEPARATOR)
    markdown = _strip_fences(markdown)
    title_lines = [line for line in _strip_fences(title).splitlines() if line.strip()]
    title = title_lines[0].strip("\"'` ") if title_lines else ""
    if not markdown:
        raise OcrResponseError("OCR response contains no markdown")
    if not title:
        raise OcrResponseError("OCR response contains no title")
    return OcrResult(markdown=markdown, title=title)
