from abc import ABC, abstractmethod

from archiver.storage.models import StorageItem


class BaseObjectStorage(ABC):
    """Contract for the archive's object storage."""

    @abstractmethod
    def put_objects(self, items: list[StorageItem]) -> None:
        """Upload every item, replacing existing objects with the same key."""

    @abstractmethod
    def list_folders(self, prefix: str) -> list[str]:
        """Return the folder-like common prefixes directly under ``prefix``."""

    @abstractmethod
    def list_pdf_keys(self, prefix: str) -> list[str]:
        """Return keys ending in ``.pdf`` anywhere under ``prefix``."""

    @abstractmethod
    def presigned_url(self, key: str, expires_in: int) -> str:
        """Return a time-limited GET URL for ``key``."""

    @abstractmethod
    def read_text(self, key: str) -> str:
        """Return the object at ``key`` decoded as UTF-8."""
