import pymupdf

from archiver.consolidation.base import BasePageSource
from archiver.consolidation.exceptions import DecodeError
from archiver.consolidation.models import FileFormat
from archiver.logging.logger import Log


class PdfPageImporter(BasePageSource):
    """Opens a standalone PDF so all of its pages can be lifted as they are."""

    def build(self, data: bytes, file_format: FileFormat) -> pymupdf.Document:
        if file_format is not FileFormat.PDF:
            raise ValueError(f"PdfPageImporter cannot handle format '{file_format.value}'")
        try:
            source = pymupdf.open(stream=data, filetype="pdf")
        except Exception as exc:
            raise DecodeError(f"PDF open failed: {exc}") from exc

        if source.needs_pass:
            Log.debug("Source PDF is encrypted, trying an empty password")
            if not source.authenticate(""):
                source.close()
                raise DecodeError("PDF is encrypted and cannot be opened without a password")
        if source.page_count == 0:
            source.close()
            raise DecodeError("PDF contains no pages")
        return source
