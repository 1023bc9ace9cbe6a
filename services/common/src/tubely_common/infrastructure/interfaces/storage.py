"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageClient(ABC):
    """Abstract base class for object storage backends bound to one bucket."""

    @abstractmethod
    def upload(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        """
        Uploads a file to storage.

        Args:
            object_name: The destination key in the bucket.
            data: File-like object containing the data.
            size: Size of the file in bytes.
            content_type: MIME type of the file.

        Raises:
            StorageUploadError: If the upload fails.
        """

    @abstractmethod
    def ensure_bucket_exists(self) -> None:
        """Ensures the bucket exists, creating it if necessary."""
