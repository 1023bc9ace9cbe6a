"""MinIO implementation of the StorageClient interface."""

from typing import BinaryIO

from minio import Minio
from tubely_common import ObjectStorageConfig, StorageUploadError, setup_logging
from tubely_common.infrastructure import StorageClient

logger = setup_logging()


class MinioStorageClient(StorageClient):
    """Stores objects in one S3-compatible bucket through the MinIO SDK."""

    def __init__(self, client: Minio, config: ObjectStorageConfig):
        self._client = client
        self._bucket_name = config.bucket_name
        self._region = config.region

    def upload(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
            logger.info(
                "File uploaded to object storage",
                extra={
                    "bucket_name": self._bucket_name,
                    "object_name": object_name,
                    "size": size,
                },
            )
        except Exception as e:
            logger.exception(
                "Object storage upload failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name, location=self._region)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info("Bucket already exists", extra={"bucket_name": self._bucket_name})
