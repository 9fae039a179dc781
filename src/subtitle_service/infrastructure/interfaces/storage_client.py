"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def copy(
        self,
        source_bucket: str,
        source_object: str,
        bucket_name: str,
        object_name: str,
    ) -> None:
        """
        Copies an object server-side.

        Args:
            source_bucket: Bucket holding the source object.
            source_object: Key of the source object.
            bucket_name: Destination bucket.
            object_name: Destination key.

        Raises:
            StorageCopyError: If the copy fails.
        """

    @abstractmethod
    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        """
        Uploads a file to storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination path/name in storage.
            data: File-like object containing the data.
            size: Size of the file in bytes.
            content_type: MIME type of the file.

        Raises:
            StorageUploadError: If the upload fails.
        """

    @abstractmethod
    def delete(self, bucket_name: str, object_name: str) -> None:
        """
        Deletes an object from storage.

        Raises:
            StorageDeleteError: If the delete fails.
        """
