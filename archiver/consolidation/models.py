import base64
import binascii
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from archiver.consolidation.exceptions import DecodeError


class FileFormat(str, Enum):
    RASTER_PNG = "raster-png"
    RASTER_JPEG = "raster-jpeg"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"

    @property
    def is_raster(self) -> bool:
        return self in (FileFormat.RASTER_PNG, FileFormat.RASTER_JPEG)


@dataclass(frozen=True)
class InputFile:
    """One submitted document, as received from the task payload."""

    position: int
    name: str
    payload: str
    format: FileFormat

    def decode(self) -> bytes:
        """Return the raw bytes carried by the base64 payload.

        Raises:
            DecodeError: if the payload is not valid base64 or decodes to nothing.
        """
        try:
            data = base64.b64decode(self.payload)
        except (binascii.Error, ValueError) as exc:
            raise DecodeError(f"Invalid base64 payload for '{self.name}': {exc}") from exc
        if not data:
            raise DecodeError(f"Payload for '{self.name}' decoded to zero bytes")
        return data


@dataclass(frozen=True)
class PageInfo:
    width: float
    height: float


@dataclass(frozen=True)
class FileOutcome:
    """Result of processing one input file: pages appended, or the skip reason."""

    position: int
    file_name: str
    page_count: int = 0
    skipped_reason: str | None = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None

    @classmethod
    def success(cls, input_file: InputFile, page_count: int) -> "FileOutcome":
        return cls(
            position=input_file.position,
            file_name=input_file.name,
            page_count=page_count,
        )

    @classmethod
    def skip(cls, input_file: InputFile, reason: str) -> "FileOutcome":
        return cls(
            position=input_file.position,
            file_name=input_file.name,
            skipped_reason=reason,
        )


@dataclass
class ConsolidationResult:
    """What a consolidation call hands back to the task layer."""

    output_path: Path
    page_count: int
    outcomes: list[FileOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if not o.skipped]

    @property
    def skipped(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if o.skipped]
