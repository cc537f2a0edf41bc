from unittest.mock import MagicMock

import pymupdf
import pytest

from archiver.consolidation.assembler import DocumentAssembler, OutputDocument
from archiver.consolidation.base import BasePageSource
from archiver.consolidation.dispatcher import PageSourceDispatcher, detect_format
from archiver.consolidation.exceptions import DecodeError
from archiver.consolidation.models import FileFormat, InputFile, PageInfo


def _fragment(*sizes: tuple[int, int]) -> pymupdf.Document:
    doc = pymupdf.open()
    for width, height in sizes:
        doc.new_page(width=width, height=height)
    return doc


def _file(position: int, name: str) -> InputFile:
    return InputFile(position=position, name=name, payload="QUJD", format=detect_format(name))


def _make_assembler() -> tuple[DocumentAssembler, MagicMock, MagicMock]:
    image_source = MagicMock(spec=BasePageSource)
    pdf_source = MagicMock(spec=BasePageSource)
    dispatcher = PageSourceDispatcher(
        {
            FileFormat.RASTER_PNG: image_source,
            FileFormat.RASTER_JPEG: image_source,
            FileFormat.PDF: pdf_source,
        }
    )
    return DocumentAssembler(dispatcher), image_source, pdf_source


class TestOutputDocument:
    def test_appends_fragment_pages_contiguously(self) -> None:
        document = OutputDocument()

        added_first = document.append(0, _fragment((10, 20)))
        added_second = document.append(3, _fragment((30, 40), (50, 60)))

        assert (added_first, added_second) == (1, 2)
        assert document.pages() == [
            PageInfo(10, 20),
            PageInfo(30, 40),
            PageInfo(50, 60),
        ]
        document.close()

    def test_rejects_out_of_order_position(self) -> None:
        document = OutputDocument()
        document.append(2, _fragment((10, 10)))

        with pytest.raises(ValueError, match="cannot follow"):
            document.append(1, _fragment((10, 10)))
        with pytest.raises(ValueError, match="cannot follow"):
            document.append(2, _fragment((10, 10)))
        assert document.page_count == 1
        document.close()

    def test_starts_empty(self) -> None:
        document = OutputDocument()
        assert document.page_count == 0
        assert document.pages() == []
        document.close()


class TestDocumentAssembler:
    def test_dispatches_each_file_to_matching_source(self) -> None:
        assembler, image_source, pdf_source = _make_assembler()
        image_source.build.side_effect = [_fragment((1, 1)), _fragment((3, 3))]
        pdf_source.build.return_value = _fragment((2, 2), (2, 3))
        files = [_file(0, "a.png"), _file(1, "b.pdf"), _file(2, "c.jpg")]
        document = OutputDocument()

        outcomes = assembler.assemble(files, document)

        assert [o.page_count for o in outcomes] == [1, 2, 1]
        assert not any(o.skipped for o in outcomes)
        assert document.pages() == [
            PageInfo(1, 1),
            PageInfo(2, 2),
            PageInfo(2, 3),
            PageInfo(3, 3),
        ]
        image_source.build.assert_any_call(b"ABC", FileFormat.RASTER_PNG)
        image_source.build.assert_any_call(b"ABC", FileFormat.RASTER_JPEG)
        pdf_source.build.assert_called_once_with(b"ABC", FileFormat.PDF)
        document.close()

    def test_decode_error_skips_file_and_continues(self) -> None:
        assembler, image_source, pdf_source = _make_assembler()
        image_source.build.side_effect = [DecodeError("bad image"), _fragment((5, 5))]
        pdf_source.build.return_value = _fragment((7, 7))
        files = [_file(0, "bad.png"), _file(1, "b.pdf"), _file(2, "c.png")]
        document = OutputDocument()

        outcomes = assembler.assemble(files, document)

        assert [o.skipped for o in outcomes] == [True, False, False]
        assert outcomes[0].skipped_reason == "bad image"
        assert outcomes[0].file_name == "bad.png"
        assert document.pages() == [PageInfo(7, 7), PageInfo(5, 5)]
        document.close()

    def test_unexpected_error_is_isolated(self) -> None:
        assembler, image_source, _pdf = _make_assembler()
        image_source.build.side_effect = [RuntimeError("boom"), _fragment((5, 5))]
        document = OutputDocument()

        outcomes = assembler.assemble([_file(0, "a.png"), _file(1, "b.png")], document)

        assert outcomes[0].skipped_reason == "unexpected error: boom"
        assert document.page_count == 1
        document.close()

    def test_unsupported_file_is_skipped_without_calling_sources(self) -> None:
        assembler, image_source, pdf_source = _make_assembler()
        document = OutputDocument()

        outcomes = assembler.assemble([_file(0, "notes.txt")], document)

        assert outcomes[0].skipped
        assert "Unsupported file type" in (outcomes[0].skipped_reason or "")
        image_source.build.assert_not_called()
        pdf_source.build.assert_not_called()
        assert document.page_count == 0
        document.close()

    def test_invalid_base64_is_skipped(self) -> None:
        assembler, image_source, _pdf = _make_assembler()
        bad = InputFile(position=0, name="a.png", payload="@@@", format=FileFormat.RASTER_PNG)
        document = OutputDocument()

        outcomes = assembler.assemble([bad], document)

        assert outcomes[0].skipped
        image_source.build.assert_not_called()
        document.close()

    def test_logs_skipped_file_name(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level("WARNING", logger="archiver")
        assembler, image_source, _pdf = _make_assembler()
        image_source.build.side_effect = DecodeError("bad image")
        document = OutputDocument()

        assembler.assemble([_file(0, "broken.png")], document)

        assert "broken.png" in caplog.text
        document.close()
