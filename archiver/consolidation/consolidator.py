from pathlib import Path

from archiver.consolidation.assembler import DocumentAssembler, OutputDocument
from archiver.consolidation.dispatcher import PageSourceDispatcher
from archiver.consolidation.exceptions import EmptyResultError
from archiver.consolidation.image_embedder import ImagePageEmbedder
from archiver.consolidation.models import ConsolidationResult, FileFormat
from archiver.consolidation.pdf_importer import PdfPageImporter
from archiver.consolidation.validator import validate_files
from archiver.consolidation.writer import PdfFileWriter
from archiver.logging.logger import Log


class DocumentConsolidator:
    """Merges a batch of images and PDFs into one multi-page PDF file.

    Pipeline: validate -> assemble (per file, in order) -> write.
    Each call owns its own output document.
    """

    def __init__(self, assembler: DocumentAssembler, writer: PdfFileWriter) -> None:
        self._assembler = assembler
        self._writer = writer

    def consolidate(self, files: object, output_path: str | Path) -> ConsolidationResult:
        """Merge ``files`` (the task's ``fileName``/``fileData`` list) into ``output_path``.

        Raises:
            InvalidInputError: if ``files`` is not a non-empty list.
            EmptyResultError: if no page could be produced; nothing is written.
            WriteError: if the merged document cannot be serialized.
        """
        input_files = validate_files(files)
        Log.info(f"Starting merge of {len(input_files)} file(s) into {output_path}")

        document = OutputDocument()
        try:
            outcomes = self._assembler.assemble(input_files, document)
            if document.page_count == 0:
                raise EmptyResultError("No valid pages could be added to the output PDF")
            page_count = document.page_count
            path = self._writer.write(document, output_path)
        finally:
            document.close()

        result = ConsolidationResult(output_path=path, page_count=page_count, outcomes=outcomes)
        Log.info(
            f"Merged {page_count} page(s) from {len(result.succeeded)} file(s), "
            f"{len(result.skipped)} skipped"
        )
        return result


def build_consolidator() -> DocumentConsolidator:
    """Build a DocumentConsolidator with the default page sources."""
    embedder = ImagePageEmbedder()
    dispatcher = PageSourceDispatcher(
        {
            FileFormat.RASTER_PNG: embedder,
            FileFormat.RASTER_JPEG: embedder,
            FileFormat.PDF: PdfPageImporter(),
        }
    )
    return DocumentConsolidator(
        assembler=DocumentAssembler(dispatcher),
        writer=PdfFileWriter(),
    )
