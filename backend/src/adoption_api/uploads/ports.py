"""Image Storage Port - interface for the image asset host.

Adapters store image bytes and return a stable public URL plus the
``public_id`` used to delete the asset later.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class StoredImage:
    """Metadata for an uploaded image.

    Attributes:
        url: Public URL clients embed in listings
        public_id: Storage identifier ("<folder>/<name>") used for deletes
        size_bytes: Size of the stored object
        content_type: MIME type of the stored object
    """
    url: str
    public_id: str
    size_bytes: int
    content_type: str


class ImageStoragePort(ABC):
    """Port interface for image storage operations."""

    @abstractmethod
    async def store_image(
        self,
        data: bytes,
        content_type: str,
        filename: str,
    ) -> StoredImage:
        """Store an image and return its public location.

        Raises:
            StorageError: If the upload fails
        """

    @abstractmethod
    async def delete_image(self, public_id: str) -> bool:
        """Delete an image.

        Returns:
            bool: True if deleted, False if it did not exist

        Raises:
            StorageError: If the delete fails
        """

    @abstractmethod
    async def image_exists(self, public_id: str) -> bool:
        """Check whether an image exists."""


class StorageError(Exception):
    """Base exception for storage operations."""
