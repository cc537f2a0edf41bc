from pathlib import Path
from unittest.mock import MagicMock

import pymupdf
import pytest

from archiver.consolidation.assembler import OutputDocument
from archiver.consolidation.exceptions import WriteError
from archiver.consolidation.writer import PdfFileWriter


def _document(page_count: int = 1) -> OutputDocument:
    document = OutputDocument()
    fragment = pymupdf.open()
    for _ in range(page_count):
        fragment.new_page(width=100, height=200)
    document.append(0, fragment)
    fragment.close()
    return document


class TestPdfFileWriter:
    def test_writes_pdf_and_returns_path(self, tmp_path: Path) -> None:
        target = tmp_path / "merged.pdf"
        document = _document(2)

        result = PdfFileWriter().write(document, target)

        assert result == target
        with pymupdf.open(target) as doc:
            assert doc.page_count == 2
        document.close()

    def test_creates_missing_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "c" / "merged.pdf"
        document = _document()

        PdfFileWriter().write(document, str(target))

        assert target.is_file()
        document.close()

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "merged.pdf"
        target.write_bytes(b"old content")
        document = _document()

        PdfFileWriter().write(document, target)

        assert target.read_bytes().startswith(b"%PDF")
        document.close()

    def test_leaves_no_temporary_files(self, tmp_path: Path) -> None:
        document = _document()

        PdfFileWriter().write(document, tmp_path / "merged.pdf")

        assert [p.name for p in tmp_path.iterdir()] == ["merged.pdf"]
        document.close()

    def test_serialization_failure_raises_write_error(self, tmp_path: Path) -> None:
        document = MagicMock(spec=OutputDocument)
        document.to_bytes.side_effect = RuntimeError("cannot serialize")

        with pytest.raises(WriteError, match="cannot serialize"):
            PdfFileWriter().write(document, tmp_path / "merged.pdf")
        assert not (tmp_path / "merged.pdf").exists()

    def test_filesystem_error_propagates_unchanged(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("file in the way")
        document = _document()

        with pytest.raises(OSError) as excinfo:
            PdfFileWriter().write(document, blocker / "merged.pdf")
        assert not isinstance(excinfo.value, WriteError)
        document.close()
