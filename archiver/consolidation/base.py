from abc import ABC, abstractmethod

import pymupdf

from archiver.consolidation.models import FileFormat


class BasePageSource(ABC):
    """Contract for strategies that turn one input file into output pages."""

    @abstractmethod
    def build(self, data: bytes, file_format: FileFormat) -> pymupdf.Document:
        """Build a standalone fragment holding the pages for one file.

        Args:
            data: Raw decoded file content.
            file_format: The format the dispatcher assigned to the file.

        Returns:
            An open PDF document with at least one page. The caller owns it
            and closes it once its pages have been appended.

        Raises:
            DecodeError: if the content cannot be parsed.
        """
