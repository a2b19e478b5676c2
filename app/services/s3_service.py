"""Service for AWS S3 operations (presigned uploads of recording segments)."""

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from fastapi import Depends

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    ".aac": "audio/aac",
    ".webm": "audio/webm",
    ".mp4": "video/mp4",
    ".mp3": "audio/mpeg",
    ".m3u8": "application/x-mpegURL",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}
DEFAULT_CONTENT_TYPE = "video/mp2t"


def content_type_for_key(key: str) -> str:
    """Guess the upload Content-Type from the key's extension (HLS segments by default)."""
    lowered = key.lower()
    for ext, content_type in CONTENT_TYPES.items():
        if lowered.endswith(ext):
            return content_type
    return DEFAULT_CONTENT_TYPE


class S3Service:
    """Service for S3 operations on the recordings bucket."""

    def __init__(self, config: Settings):
        self.client = boto3.client(
            "s3",
            region_name=config.CAP_AWS_REGION,
            aws_access_key_id=config.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=config.AWS_SECRET_ACCESS_KEY,
            config=Config(signature_version="s3v4"),
        )
        self.bucket_name = config.CAP_AWS_BUCKET
        self.expires_in = config.UPLOAD_EXPIRES_SECONDS

    def generate_presigned_post(
        self, key: str, metadata: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Generate presigned POST data for uploading one object.

        metadata entries are sent as x-amz-meta-<name> form fields.
        Returns {"url": ..., "fields": {...}} as produced by boto3.
        """
        content_type = content_type_for_key(key)
        fields = {"Content-Type": content_type}
        conditions = [{"Content-Type": content_type}]
        for name, value in (metadata or {}).items():
            field = f"x-amz-meta-{name}"
            fields[field] = value
            conditions.append({field: value})

        try:
            return self.client.generate_presigned_post(
                Bucket=self.bucket_name,
                Key=key,
                Fields=fields,
                Conditions=conditions,
                ExpiresIn=self.expires_in,
            )
        except Exception as e:
            logger.error("Error generating presigned POST for %s: %s", key, e)
            raise


def get_s3_service(config: Settings = Depends(get_settings)) -> S3Service:
    """FastAPI dependency for the S3 service."""
    return S3Service(config)
