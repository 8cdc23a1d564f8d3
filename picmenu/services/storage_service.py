from minio import Minio
from minio.error import S3Error
from urllib3.exceptions import HTTPError
from PIL import Image, UnidentifiedImageError
import io
import logging
import uuid
from datetime import timedelta
from typing import Optional
from picmenu.core.config import settings, Settings
from picmenu.core.errors import StorageError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_FORMATS = {"JPEG", "PNG", "WEBP"}

# Raised by the MinIO client when the server rejects a call or cannot be reached
STORAGE_ERRORS = (S3Error, HTTPError, OSError)

def validate_menu_image(content: bytes, content_type: Optional[str], max_bytes: int) -> str:
    """Check an uploaded menu photo and return its Pillow format name."""
    if not content_type or not content_type.startswith("image/"):
        raise StorageError("Only image files supported")
    if not content:
        raise StorageError("Empty file")
    if len(content) > max_bytes:
        raise StorageError("File too large")
    try:
        with Image.open(io.BytesIO(content)) as img:
            img.verify()
            image_format = img.format
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise StorageError("File is not a readable image")
    if image_format not in ALLOWED_IMAGE_FORMATS:
        raise StorageError(f"Unsupported image format: {image_format}")
    return image_format

class StorageService:
    def __init__(self, config: Settings = settings):
        # Internal client for bucket and object operations
        self.client = Minio(
            config.MINIO_ENDPOINT,
            access_key=config.MINIO_ACCESS_KEY,
            secret_key=config.MINIO_SECRET_KEY,
            secure=config.MINIO_SECURE,
            region="us-east-1"  # Explicit region to avoid lookup
        )
        # Presigned URLs must carry the host the model provider will fetch from
        presign_endpoint = config.MINIO_PUBLIC_ENDPOINT or config.MINIO_ENDPOINT
        self.presign_client = Minio(
            presign_endpoint,
            access_key=config.MINIO_ACCESS_KEY,
            secret_key=config.MINIO_SECRET_KEY,
            secure=config.MINIO_SECURE,
            region="us-east-1"
        )
        self.bucket = config.MINIO_BUCKET
        self.url_expires = config.UPLOAD_URL_EXPIRES_SECONDS
        self._bucket_ready = False

    def _ensure_bucket(self):
        if self._bucket_ready:
            return
        if not self.client.bucket_exists(self.bucket):
            self.client.make_bucket(self.bucket)
        self._bucket_ready = True

    def upload_file(self, filename: str, file_content: bytes, content_type: str = "application/octet-stream") -> str:
        object_name = f"{uuid.uuid4()}/{filename}"
        try:
            self._ensure_bucket()
            self.client.put_object(
                self.bucket, object_name, io.BytesIO(file_content),
                length=len(file_content),
                content_type=content_type
            )
        except STORAGE_ERRORS as exc:
            logger.error("MinIO upload of %s failed: %s", object_name, exc)
            raise StorageError("Could not store uploaded file", status_code=502)
        return object_name

    def get_presigned_url(self, object_name: str, expires: Optional[int] = None) -> str:
        exp = timedelta(seconds=expires if expires is not None else self.url_expires)
        try:
            return self.presign_client.presigned_get_object(self.bucket, object_name, expires=exp)
        except STORAGE_ERRORS as exc:
            logger.error("Presigning %s failed: %s", object_name, exc)
            raise StorageError("Could not create a link for the uploaded file", status_code=502)
