import pymupdf

from archiver.consolidation.dispatcher import PageSourceDispatcher
from archiver.consolidation.exceptions import FileSkippedError
from archiver.consolidation.models import FileOutcome, InputFile, PageInfo
from archiver.logging.logger import Log


class OutputDocument:
    """The merged PDF being built by one consolidation call.

    Pages are only ever appended, one input position at a time, and
    positions must strictly increase so page order follows input order.
    """

    def __init__(self) -> None:
        self._document = pymupdf.open()
        self._last_position = -1

    @property
    def page_count(self) -> int:
        return self._document.page_count

    def append(self, position: int, fragment: pymupdf.Document) -> int:
        """Append every page of ``fragment`` after the current last page.

        Returns:
            Number of pages appended.
        """
        if position <= self._last_position:
            raise ValueError(
                f"Pages for position {position} cannot follow position {self._last_position}"
            )
        before = self._document.page_count
        self._document.insert_pdf(fragment)
        self._last_position = position
        return self._document.page_count - before

    def pages(self) -> list[PageInfo]:
        return [
            PageInfo(width=page.rect.width, height=page.rect.height)
            for page in self._document
        ]

    def to_bytes(self) -> bytes:
        return self._document.tobytes(garbage=3, deflate=True)

    def close(self) -> None:
        self._document.close()


class DocumentAssembler:
    """Feeds validated files, in order, through their page source into the output."""

    def __init__(self, dispatcher: PageSourceDispatcher) -> None:
        self._dispatcher = dispatcher

    def assemble(self, files: list[InputFile], document: OutputDocument) -> list[FileOutcome]:
        outcomes: list[FileOutcome] = []
        for index, input_file in enumerate(files, start=1):
            Log.info(f"Processing file {index}/{len(files)}: {input_file.name}")
            outcome = self._process(input_file, document)
            if outcome.skipped:
                Log.warning(f"Skipping file '{input_file.name}': {outcome.skipped_reason}")
            else:
                Log.info(f"Added {outcome.page_count} page(s) from '{input_file.name}'")
            outcomes.append(outcome)
        return outcomes

    def _process(self, input_file: InputFile, document: OutputDocument) -> FileOutcome:
        try:
            file_format, source = self._dispatcher.resolve(input_file)
            fragment = source.build(input_file.decode(), file_format)
        except FileSkippedError as exc:
            return FileOutcome.skip(input_file, str(exc))
        except Exception as exc:
            Log.exception(f"Unexpected error while processing '{input_file.name}'")
            return FileOutcome.skip(input_file, f"unexpected error: {exc}")

        try:
            added = document.append(input_file.position, fragment)
        finally:
            fragment.close()
        return FileOutcome.success(input_file, added)
