"""S3-compatible object storage client for product images."""

import asyncio
import logging
from typing import Any, Optional
from urllib.parse import quote

import boto3
from boto3.exceptions import S3UploadFailedError
from boto3.s3.transfer import TransferConfig
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from src.clients.interfaces import (
    ProgressCallback,
    StorageException,
    StorageFile,
    StorageInterface,
    UploadProgress,
)
from src.config.configuration import ObjectStorageConfig
from src.models import ImageFile

logger = logging.getLogger(__name__)

MB = 1024 * 1024


class _ProgressRelay:
    """Forwards boto3 transfer callbacks to the event loop.

    boto3 invokes the callback from its transfer threads with the number of
    bytes sent since the last call; totals are accumulated on the loop thread.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        total_bytes: int,
        on_progress: Optional[ProgressCallback],
    ):
        self._loop = loop
        self._total_bytes = total_bytes
        self._on_progress = on_progress
        self._transferred = 0

    def __call__(self, bytes_amount: int) -> None:
        self._loop.call_soon_threadsafe(self._advance, bytes_amount)

    def _advance(self, bytes_amount: int) -> None:
        self._transferred += bytes_amount
        if self._on_progress is not None:
            self._on_progress(UploadProgress(self._transferred, self._total_bytes))


class S3StorageClient(StorageInterface):
    """Uploads images to an S3 bucket through boto3's managed transfer.

    Files above the multipart threshold are sent in parts, and progress is
    reported per part as it is acknowledged.
    """

    def __init__(
        self,
        s3_client: Any,
        bucket_name: str,
        region: str = "us-east-1",
        endpoint_url: Optional[str] = None,
        public_base_url: Optional[str] = None,
        multipart_threshold_mb: int = 8,
    ):
        """Initialize the storage client.

        Args:
            s3_client: A boto3 S3 client
            bucket_name: Bucket that receives the images
            region: AWS region of the bucket
            endpoint_url: Custom endpoint for S3-compatible services (MinIO etc.)
            public_base_url: CDN or custom domain used to build public URLs
            multipart_threshold_mb: Size above which uploads are split into parts
        """
        self._s3 = s3_client
        self._bucket_name = bucket_name
        self._region = region
        self._endpoint_url = endpoint_url
        self._public_base_url = public_base_url
        self._transfer_config = TransferConfig(
            multipart_threshold=multipart_threshold_mb * MB,
            multipart_chunksize=multipart_threshold_mb * MB,
        )

    @classmethod
    def from_config(cls, config: ObjectStorageConfig) -> "S3StorageClient":
        """Create a client with a boto3 S3 client built from configuration."""
        boto_config = BotoConfig(signature_version="s3v4", s3={"addressing_style": "path"})
        s3_client = boto3.client(
            "s3",
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
            region_name=config.region,
            endpoint_url=config.endpoint_url,
            config=boto_config,
        )
        return cls(
            s3_client,
            bucket_name=config.bucket_name,
            region=config.region,
            endpoint_url=config.endpoint_url,
            public_base_url=config.public_base_url,
            multipart_threshold_mb=config.multipart_threshold_mb,
        )

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    async def upload(
        self,
        image: ImageFile,
        path: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> StorageFile:
        """
        Upload an image to the bucket.

        Args:
            image: Image to upload
            path: Object key
            on_progress: Receives UploadProgress snapshots on the event loop

        Returns:
            StorageFile with the stored object's metadata

        Raises:
            StorageException: If the transfer fails
        """
        relay = _ProgressRelay(asyncio.get_running_loop(), image.size, on_progress)
        content_type = image.mime_type

        try:
            await asyncio.to_thread(
                self._s3.upload_fileobj,
                Fileobj=image.open(),
                Bucket=self._bucket_name,
                Key=path,
                ExtraArgs={"ContentType": content_type},
                Callback=relay,
                Config=self._transfer_config,
            )
        except (ClientError, BotoCoreError, S3UploadFailedError) as e:
            logger.error(f"Failed to upload file to S3: {path}. Error: {e}")
            raise StorageException(str(e)) from e

        logger.info(f"Successfully uploaded file to S3: {path}")
        return StorageFile(
            key=path,
            size=image.size,
            content_type=content_type,
            bucket=self._bucket_name,
        )

    async def get_url(self, key: str) -> str:
        """
        Build the public URL of a stored object.

        Uses public_base_url when configured, then the custom endpoint, then
        the regional virtual-hosted AWS URL.
        """
        if not key:
            raise StorageException("Cannot build a URL for an empty object key")

        quoted_key = quote(key)
        if self._public_base_url:
            return f"{self._public_base_url.rstrip('/')}/{quoted_key}"
        if self._endpoint_url:
            return f"{self._endpoint_url.rstrip('/')}/{self._bucket_name}/{quoted_key}"
        return f"https://{self._bucket_name}.s3.{self._region}.amazonaws.com/{quoted_key}"
