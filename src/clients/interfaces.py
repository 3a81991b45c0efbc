"""Contracts for the external services the submission workflow depends on.

Concrete implementations:
    - S3StorageClient: S3-compatible object storage
    - CosmosDBClient: Azure Cosmos DB document store
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from src.models import ImageFile


class StorageException(Exception):
    """Raised when an upload or URL lookup against object storage fails."""
    pass


class DocumentStoreError(Exception):
    """Raised when a document cannot be written to the document store."""
    pass


@dataclass(frozen=True)
class UploadProgress:
    """Snapshot of an in-flight upload."""

    bytes_transferred: int
    total_bytes: int

    @property
    def ratio(self) -> float:
        if self.total_bytes <= 0:
            return 1.0
        return self.bytes_transferred / self.total_bytes


ProgressCallback = Callable[[UploadProgress], None]


@dataclass(frozen=True)
class StorageFile:
    """
    Represents a stored file with its metadata.

    Attributes:
        key: Path of the object inside the bucket
        size: File size in bytes
        content_type: MIME type of the file
        bucket: Storage bucket name
    """

    key: str
    size: int
    content_type: str
    bucket: Optional[str] = None


class StorageInterface(ABC):
    """Abstract interface for object storage."""

    @abstractmethod
    async def upload(
        self,
        image: ImageFile,
        path: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> StorageFile:
        """
        Upload an image to storage.

        Args:
            image: The image to upload
            path: Destination key in the bucket
            on_progress: Called on the event loop as bytes are transferred

        Returns:
            StorageFile describing the stored object

        Raises:
            StorageException: If the upload fails
        """

    @abstractmethod
    async def get_url(self, key: str) -> str:
        """
        Resolve a stable URL for a stored object.

        Raises:
            StorageException: If the URL cannot be produced
        """


class DocumentStoreInterface(ABC):
    """Abstract interface for a document database."""

    @abstractmethod
    async def create_item(self, collection: str, item: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a new document into a collection.

        Raises:
            DocumentStoreError: If the write fails
        """
