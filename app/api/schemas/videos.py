"""Pydantic schemas for the desktop video and upload endpoints"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class CreateVideoResponse(BaseModel):
    """Storage metadata the desktop app needs to upload a new recording."""
    id: str
    user_id: str
    aws_region: Optional[str] = None
    aws_bucket: Optional[str] = None


class SignedUploadRequest(BaseModel):
    """Request schema for a presigned upload of one recording object."""

    fileKey: str = Field(..., description="Object key, must start with '<user_id>/'")
    duration: Optional[str] = None
    bandwidth: Optional[str] = None
    resolution: Optional[str] = None
    videoCodec: Optional[str] = None
    audioCodec: Optional[str] = None

    def metadata(self) -> Dict[str, str]:
        """Optional recording details, keyed by their S3 metadata name."""
        values = {
            "duration": self.duration,
            "bandwidth": self.bandwidth,
            "resolution": self.resolution,
            "videocodec": self.videoCodec,
            "audiocodec": self.audioCodec,
        }
        return {name: value for name, value in values.items() if value is not None}


class PresignedPost(BaseModel):
    url: str
    fields: Dict[str, Any]


class SignedUploadResponse(BaseModel):
    presignedPostData: PresignedPost
