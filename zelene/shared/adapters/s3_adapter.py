"""
S3 adapter - object storage for query attachments.

Provides:
- Object upload
- Time-limited (presigned) download URLs

The boto3 client is synchronous; async callers go through the ``*_async``
wrappers, which run the blocking call in a worker thread.
"""

import asyncio
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from zelene.config.settings import settings
from zelene.shared.core.exceptions import ExternalServiceError
from zelene.shared.core.logging import get_logger


logger = get_logger("storage")


class S3Adapter:
    """
    Adapter for S3-compatible object storage.

    Handles:
    - Uploading attachment bytes under a key
    - Generating presigned GET URLs for admin views
    """

    def __init__(
        self,
        bucket: Optional[str] = None,
        region: Optional[str] = None,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ):
        """
        Initialize S3 adapter.

        Args:
            bucket: Bucket holding attachments
            region: AWS region
            aws_access_key_id: AWS access key
            aws_secret_access_key: AWS secret key
            endpoint_url: Custom endpoint for S3-compatible services
        """
        self.bucket = bucket or settings.S3_BUCKET
        self.region = region or settings.AWS_REGION
        self.aws_access_key_id = aws_access_key_id or settings.AWS_ACCESS_KEY_ID
        self.aws_secret_access_key = aws_secret_access_key or settings.AWS_SECRET_ACCESS_KEY
        self.endpoint_url = endpoint_url or settings.S3_ENDPOINT_URL
        self._client = None

    @property
    def client(self):
        """Lazy-loaded S3 client."""
        if self._client is None:
            kwargs = {"region_name": self.region}
            if self.endpoint_url:
                kwargs["endpoint_url"] = self.endpoint_url
            if self.aws_access_key_id and self.aws_secret_access_key:
                kwargs["aws_access_key_id"] = self.aws_access_key_id
                kwargs["aws_secret_access_key"] = self.aws_secret_access_key
            # Without explicit keys boto3 falls back to IAM role / environment
            self._client = boto3.client("s3", **kwargs)
        return self._client

    def put_object(self, key: str, data: bytes, content_type: str) -> None:
        """
        Upload bytes under key.

        Args:
            key: Object key ("images/3f2c....png")
            data: File contents
            content_type: MIME type stored with the object

        Raises:
            ExternalServiceError: If the upload fails
        """
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("S3 upload failed", key=key, bucket=self.bucket, error=str(e))
            raise ExternalServiceError("storage", "Failed to upload file") from e

        logger.info("Uploaded object", key=key, size=len(data))

    def presigned_url(self, key: str, expires_in: Optional[int] = None) -> str:
        """
        Generate a time-limited GET URL for key.

        Args:
            key: Object key
            expires_in: Lifetime in seconds (default STORAGE_URL_EXPIRE_SECONDS)

        Raises:
            ExternalServiceError: If signing fails
        """
        try:
            return self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_in or settings.STORAGE_URL_EXPIRE_SECONDS,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("S3 URL signing failed", key=key, error=str(e))
            raise ExternalServiceError("storage", "Failed to generate file URL") from e

    # ═══════════════════════════════════════════════════════════════════════════
    # ASYNC WRAPPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def put_object_async(self, key: str, data: bytes, content_type: str) -> None:
        """Upload without blocking the event loop."""
        await asyncio.to_thread(self.put_object, key, data, content_type)

    async def presigned_url_async(self, key: str, expires_in: Optional[int] = None) -> str:
        """Sign a URL without blocking the event loop."""
        return await asyncio.to_thread(self.presigned_url, key, expires_in)
