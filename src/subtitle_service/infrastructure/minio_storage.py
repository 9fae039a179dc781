"""MinIO SDK implementation of the StorageClient interface."""

from typing import BinaryIO

from minio import Minio
from minio.commonconfig import CopySource

from subtitle_service.exceptions import (
    StorageCopyError,
    StorageDeleteError,
    StorageUploadError,
)
from subtitle_service.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()


class MinioStorageClient(StorageClient):
    """Handles S3 object operations using the MinIO client."""

    def __init__(self, client: Minio):
        self._client = client

    def copy(
        self,
        source_bucket: str,
        source_object: str,
        bucket_name: str,
        object_name: str,
    ) -> None:
        try:
            self._client.copy_object(
                bucket_name=bucket_name,
                object_name=object_name,
                source=CopySource(source_bucket, source_object),
            )
            logger.info(
                "Object copied",
                extra={
                    "source_bucket": source_bucket,
                    "source_object": source_object,
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                },
            )
        except Exception as e:
            logger.exception(
                "Object copy failed",
                extra={
                    "source_bucket": source_bucket,
                    "source_object": source_object,
                    "object_name": object_name,
                },
            )
            raise StorageCopyError(object_name, e) from e

    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        try:
            self._client.put_object(
                bucket_name=bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
            logger.info(
                "File uploaded",
                extra={
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                    "content_type": content_type,
                },
            )
        except Exception as e:
            logger.exception(
                "Upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e

    def delete(self, bucket_name: str, object_name: str) -> None:
        try:
            self._client.remove_object(bucket_name=bucket_name, object_name=object_name)
            logger.info(
                "Object deleted",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
        except Exception as e:
            raise StorageDeleteError(object_name, e) from e
