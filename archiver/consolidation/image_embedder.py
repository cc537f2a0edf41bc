import pymupdf

from archiver.consolidation.base import BasePageSource
from archiver.consolidation.exceptions import DecodeError
from archiver.consolidation.models import FileFormat


class ImagePageEmbedder(BasePageSource):
    """Places one raster image on a new page of exactly the image's size."""

    def build(self, data: bytes, file_format: FileFormat) -> pymupdf.Document:
        if not file_format.is_raster:
            raise ValueError(f"ImagePageEmbedder cannot handle format '{file_format.value}'")
        try:
            pixmap = pymupdf.Pixmap(data)
        except Exception as exc:
            raise DecodeError(f"Image decode failed: {exc}") from exc
        width, height = pixmap.width, pixmap.height
        if width <= 0 or height <= 0:
            raise DecodeError(f"Image has invalid dimensions {width}x{height}")

        fragment = pymupdf.open()
        try:
            page = fragment.new_page(width=width, height=height)
            page.insert_image(page.rect, pixmap=pixmap, keep_proportion=False)
        except Exception as exc:
            fragment.close()
            raise DecodeError(f"Image embedding failed: {exc}") from exc
        return fragment
