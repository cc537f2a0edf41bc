class ConsolidationError(Exception):
    """Base exception for all consolidation errors."""


class InvalidInputError(ConsolidationError):
    """Raised when the top-level file list is empty or not a list."""


class FileSkippedError(ConsolidationError):
    """Base for per-file problems. The file is skipped, the batch continues."""


class UnsupportedFormatWarning(FileSkippedError):
    """Raised when a file extension is not one of the recognized formats."""


class DecodeError(FileSkippedError):
    """Raised when a file's payload, image data or PDF data cannot be parsed."""


class EmptyResultError(ConsolidationError):
    """Raised when no page survived across all input files."""


class WriteError(ConsolidationError):
    """Raised when the merged document cannot be serialized."""
