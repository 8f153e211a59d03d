import logging
from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

import boto3
import cloudinary
import cloudinary.uploader
from botocore.exceptions import BotoCoreError, ClientError
from cloudinary.exceptions import Error as CloudinaryError

from .config import settings
from .errors import ImageUploadError

logger = logging.getLogger(__name__)


class ImageUploader(ABC):
    """Stores an image on an external host and returns its public URL"""

    @abstractmethod
    def upload(self, fileobj: BinaryIO, folder: str, public_id: str,
               content_type: Optional[str] = None) -> str:
        """
        Upload `fileobj` under `folder`/`public_id`, replacing any previous
        image with the same id. `content_type` is the MIME type sent by the
        client, when known. Returns the secure URL of the stored image.
        Raises ImageUploadError when the host fails.
        """


class CloudinaryUploader(ImageUploader):
    """Handles image storage using Cloudinary"""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str):
        if not all([cloud_name, api_key, api_secret]):
            missing = [
                name for name, value in (
                    ("CLOUDINARY_CLOUD_NAME", cloud_name),
                    ("CLOUDINARY_API_KEY", api_key),
                    ("CLOUDINARY_API_SECRET", api_secret),
                ) if not value
            ]
            logger.warning(f"Cloudinary not properly configured - missing: {', '.join(missing)}")
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )
        logger.info(f"Cloudinary uploader initialized for cloud '{cloud_name or '<unset>'}'")

    def upload(self, fileobj: BinaryIO, folder: str, public_id: str,
               content_type: Optional[str] = None) -> str:
        # Cloudinary detects the format from the file contents
        logger.info(f"Uploading image to Cloudinary as {folder}/{public_id}")
        try:
            result = cloudinary.uploader.upload(
                fileobj,
                folder=folder,
                public_id=public_id,
                overwrite=True,
            )
        except CloudinaryError as e:
            logger.error(f"Cloudinary upload failed: {e}")
            raise ImageUploadError(str(e)) from e

        secure_url = result.get("secure_url")
        if not secure_url:
            raise ImageUploadError("Cloudinary response did not include a secure_url")
        logger.info(f"Image uploaded to {secure_url}")
        return secure_url


class R2Uploader(ImageUploader):
    """Handles image storage using Cloudflare R2"""

    def __init__(self, endpoint: str, access_key_id: str, secret_access_key: str,
                 bucket: str, public_url: str, client=None):
        self.bucket = bucket
        self.public_url = public_url.rstrip("/")
        self.client = client
        if self.client is None:
            if not all([endpoint, access_key_id, secret_access_key]):
                logger.warning("R2 storage not properly configured, uploads will fail")
            else:
                self.client = boto3.client(
                    "s3",
                    endpoint_url=endpoint,
                    aws_access_key_id=access_key_id,
                    aws_secret_access_key=secret_access_key,
                )
                logger.info(f"R2 uploader initialized for bucket '{bucket}'")

    def upload(self, fileobj: BinaryIO, folder: str, public_id: str,
               content_type: Optional[str] = None) -> str:
        if not self.client:
            raise ImageUploadError("R2 client is not initialized")

        key = f"{folder}/{public_id}"
        logger.info(f"Uploading image to R2 bucket '{self.bucket}' with key '{key}'")
        try:
            # put_object always replaces an existing key
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=fileobj.read(),
                ContentType=content_type or "application/octet-stream",
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"R2 upload failed: {e}")
            raise ImageUploadError(str(e)) from e

        return f"{self.public_url}/{key}"


def create_image_uploader() -> ImageUploader:
    """Build the uploader selected by IMAGE_STORAGE_PROVIDER"""
    if settings.IMAGE_STORAGE_PROVIDER == "r2":
        return R2Uploader(
            endpoint=settings.R2_ENDPOINT,
            access_key_id=settings.R2_ACCESS_KEY_ID,
            secret_access_key=settings.R2_SECRET_ACCESS_KEY,
            bucket=settings.R2_BUCKET_NAME,
            public_url=settings.R2_PUBLIC_URL,
        )
    return CloudinaryUploader(
        cloud_name=settings.CLOUDINARY_CLOUD_NAME,
        api_key=settings.CLOUDINARY_API_KEY,
        api_secret=settings.CLOUDINARY_API_SECRET,
    )


_image_uploader: Optional[ImageUploader] = None


def get_image_uploader() -> ImageUploader:
    """FastAPI dependency returning the app-wide uploader"""
    global _image_uploader
    if _image_uploader is None:
        _image_uploader = create_image_uploader()
    return _image_uploader
