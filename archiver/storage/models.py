from dataclasses import dataclass


@dataclass(frozen=True)
class StorageItem:
    """One object to upload."""

    key: str
    body: bytes | str
    content_type: str = "text/markdown"
