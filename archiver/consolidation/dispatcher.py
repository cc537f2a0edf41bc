from pathlib import PurePosixPath

from archiver.consolidation.base import BasePageSource
from archiver.consolidation.exceptions import UnsupportedFormatWarning
from archiver.consolidation.models import FileFormat, InputFile

EXTENSION_FORMATS: dict[str, FileFormat] = {
    ".png": FileFormat.RASTER_PNG,
    ".jpg": FileFormat.RASTER_JPEG,
    ".jpeg": FileFormat.RASTER_JPEG,
    ".pdf": FileFormat.PDF,
}


def detect_format(file_name: str) -> FileFormat:
    """Classify a file by its extension only, case-insensitively."""
    extension = PurePosixPath(file_name.replace("\\", "/")).suffix.lower()
    return EXTENSION_FORMATS.get(extension, FileFormat.UNSUPPORTED)


class PageSourceDispatcher:
    """Picks the page source strategy for a file based on its format."""

    def __init__(self, sources: dict[FileFormat, BasePageSource]) -> None:
        self._sources = sources

    def resolve(self, input_file: InputFile) -> tuple[FileFormat, BasePageSource]:
        file_format = input_file.format
        source = self._sources.get(file_format)
        if source is None:
            raise UnsupportedFormatWarning(
                f"Unsupported file type for '{input_file.name}'"
            )
        return file_format, source
