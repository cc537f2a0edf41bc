from abc import ABC, abstractmethod

from archiver.ocr.models import OcrResult


class BaseOcrClient(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def transcribe(self, pdf_bytes: bytes, excluded_titles: list[str]) -> OcrResult:
        """Transcribe a merged PDF into Markdown with YAML frontmatter.

        Args:
            pdf_bytes: The consolidated PDF.
            excluded_titles: Titles already used in the archive; the model
                must pick a different one.

        Returns:
            OcrResult with the markdown document and its title.

        Raises:
            OcrError: on any failure.
        """
