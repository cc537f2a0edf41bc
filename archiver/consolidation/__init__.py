from archiver.consolidation.consolidator import DocumentConsolidator, build_consolidator
from archiver.consolidation.exceptions import (
    ConsolidationError,
    DecodeError,
    EmptyResultError,
    InvalidInputError,
    UnsupportedFormatWarning,
    WriteError,
)
from archiver.consolidation.models import ConsolidationResult

__all__ = [
    "ConsolidationError",
    "ConsolidationResult",
    "DecodeError",
    "DocumentConsolidator",
    "EmptyResultError",
    "InvalidInputError",
    "UnsupportedFormatWarning",
    "WriteError",
    "build_consolidator",
]
