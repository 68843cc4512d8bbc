"""Image upload endpoints (any authenticated administrator).

POST /upload accepts one multipart ``image`` field (JPEG, PNG or WebP, up
to UPLOAD_MAX_BYTES). DELETE /upload/{public_id} accepts the public_id as
returned, or with '-' in place of its first '/' for clients that cannot
put a slash in a path segment.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, UploadFile, status

from ..auth.dependencies import CurrentClaims
from ..dependencies import AppSettings, ImageStorage
from ..errors import NotFoundError, ServerError, ValidationError
from ..observability.metrics import uploads_total
from ..schemas.common import Envelope, MessageData
from .ports import StorageError
from .schemas import UploadData

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["Uploads"])

ALLOWED_CONTENT_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png", "image/webp"})


def normalize_public_id(public_id: str) -> str:
    """'adopcion-abc123.jpg' -> 'adopcion/abc123.jpg'; ids with '/' are kept."""
    if "/" in public_id:
        return public_id
    return public_id.replace("-", "/", 1)


@router.post("", response_model=Envelope[UploadData], status_code=status.HTTP_201_CREATED)
async def upload_image(
    claims: CurrentClaims,
    settings: AppSettings,
    storage: ImageStorage,
    image: Optional[UploadFile] = File(None),
):
    """Upload an image and return its public URL.

    Raises:
        400 NO_FILE, INVALID_FILE, FILE_TOO_LARGE
        500 UPLOAD_ERROR
    """
    if image is None:
        raise ValidationError("No file was provided", code="NO_FILE")

    if (image.content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
        uploads_total.labels(operation="upload", status="rejected").inc()
        raise ValidationError("Only JPEG, PNG and WebP images are allowed", code="INVALID_FILE")

    # Read one byte past the limit to detect oversize files without buffering them whole
    data = await image.read(settings.UPLOAD_MAX_BYTES + 1)
    if not data:
        raise ValidationError("No file was provided", code="NO_FILE")
    if len(data) > settings.UPLOAD_MAX_BYTES:
        uploads_total.labels(operation="upload", status="rejected").inc()
        max_mb = settings.UPLOAD_MAX_BYTES // (1024 * 1024)
        raise ValidationError(f"File exceeds the {max_mb}MB limit", code="FILE_TOO_LARGE")

    try:
        stored = await storage.store_image(data, image.content_type.lower(), image.filename or "")
    except StorageError as e:
        uploads_total.labels(operation="upload", status="error").inc()
        logger.error(f"Image upload failed: {e}", extra={"org_id": claims.organization_id})
        raise ServerError("Error uploading image", code="UPLOAD_ERROR")

    uploads_total.labels(operation="upload", status="success").inc()
    return Envelope(
        data=UploadData(url=stored.url, public_id=stored.public_id),
        message="Image uploaded",
    )


@router.delete("/{public_id:path}", response_model=Envelope[MessageData])
async def delete_image(public_id: str, claims: CurrentClaims, storage: ImageStorage):
    key = normalize_public_id(public_id)
    try:
        deleted = await storage.delete_image(key)
    except StorageError as e:
        uploads_total.labels(operation="delete", status="error").inc()
        logger.error(f"Image delete failed: {e}", extra={"org_id": claims.organization_id})
        raise ServerError("Error deleting image", code="DELETE_ERROR")

    if not deleted:
        raise NotFoundError("Image not found")

    uploads_total.labels(operation="delete", status="success").inc()
    return Envelope(data=MessageData(message="Image deleted"))
