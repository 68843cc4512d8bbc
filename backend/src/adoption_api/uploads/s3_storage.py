"""S3 image storage adapter using boto3.

Works with AWS S3, MinIO and other S3-compatible services.
Object key format: {folder}/{uuid4 hex}.{ext}; the key is the public_id.
"""

import logging
import uuid
from io import BytesIO
from typing import Optional

import boto3
from botocore.exceptions import ClientError, NoCredentialsError

from .ports import ImageStoragePort, StorageError, StoredImage

logger = logging.getLogger(__name__)

EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}


class S3ImageStorage(ImageStoragePort):
    """Store uploaded images in an S3 bucket.

    Example:
        storage = S3ImageStorage.from_settings(get_settings())
        stored = await storage.store_image(data, "image/png", "perro.png")
        stored.url  # public URL
    """

    def __init__(
        self,
        endpoint_url: Optional[str],
        access_key: str,
        secret_key: str,
        bucket_name: str,
        region: str = "us-east-1",
        folder: str = "adopcion",
        public_base_url: Optional[str] = None,
    ):
        """Initialize the adapter.

        Args:
            endpoint_url: S3 endpoint URL (None for AWS S3, URL for MinIO)
            access_key: S3 access key ID
            secret_key: S3 secret access key
            bucket_name: Bucket holding the images
            region: AWS region
            folder: Key prefix for uploaded images
            public_base_url: Base URL for public links (CDN); derived from the
                endpoint when omitted

        Raises:
            StorageError: If S3 client initialization fails
        """
        try:
            self.s3_client = boto3.client(
                "s3",
                endpoint_url=endpoint_url,
                aws_access_key_id=access_key,
                aws_secret_access_key=secret_key,
                region_name=region,
            )
        except NoCredentialsError as e:
            raise StorageError(f"Invalid S3 credentials: {e}")

        self.endpoint_url = endpoint_url
        self.bucket_name = bucket_name
        self.region = region
        self.folder = folder.strip("/")
        self.public_base_url = public_base_url

        logger.info(
            f"Initialized S3 image storage: bucket={bucket_name}, "
            f"endpoint={endpoint_url or 'AWS S3'}, region={region}"
        )

    @classmethod
    def from_settings(cls, settings) -> "S3ImageStorage":
        return cls(
            endpoint_url=settings.S3_ENDPOINT_URL,
            access_key=settings.S3_ACCESS_KEY,
            secret_key=settings.S3_SECRET_KEY,
            bucket_name=settings.S3_BUCKET,
            region=settings.S3_REGION,
            folder=settings.UPLOAD_FOLDER,
            public_base_url=settings.ASSET_PUBLIC_BASE_URL,
        )

    def public_url(self, key: str) -> str:
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{key}"
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket_name}/{key}"
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"

    def _generate_key(self, content_type: str) -> str:
        extension = EXTENSIONS.get(content_type, "bin")
        return f"{self.folder}/{uuid.uuid4().hex}.{extension}"

    async def store_image(self, data: bytes, content_type: str, filename: str) -> StoredImage:
        if not data:
            raise ValueError("Cannot store empty file")

        key = self._generate_key(content_type)
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=BytesIO(data),
                ContentType=content_type,
                Metadata={"original_filename": filename or ""},
            )
        except ClientError as e:
            logger.error(f"Failed to upload image: key={key}, error={e}")
            raise StorageError(f"Failed to upload image: {e}")

        logger.info(f"Uploaded image: key={key}, size={len(data)}, content_type={content_type}")
        return StoredImage(
            url=self.public_url(key),
            public_id=key,
            size_bytes=len(data),
            content_type=content_type,
        )

    async def image_exists(self, public_id: str) -> bool:
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=public_id)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return False
            raise StorageError(f"Failed to check image existence: {e}")

    async def delete_image(self, public_id: str) -> bool:
        if not await self.image_exists(public_id):
            logger.warning(f"Image not found for deletion: key={public_id}")
            return False

        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=public_id)
        except ClientError as e:
            logger.error(f"Failed to delete image: key={public_id}, error={e}")
            raise StorageError(f"Failed to delete image: {e}")

        logger.info(f"Deleted image: key={public_id}")
        return True
