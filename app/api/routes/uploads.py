"""API routes for presigned uploads of recording segments"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.api.schemas.videos import SignedUploadRequest, SignedUploadResponse
from app.config import Settings, get_settings
from app.core.auth import extract_bearer_token, get_optional_user, set_session_cookie
from app.core.cors import cors_headers
from app.core.models import User
from app.services.s3_service import S3Service, get_s3_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/upload", tags=["uploads"])

UPLOAD_METHODS = "POST, OPTIONS"


@router.options("/signed")
def signed_upload_preflight(request: Request, config: Settings = Depends(get_settings)):
    return Response(
        status_code=status.HTTP_200_OK,
        headers=cors_headers(request, config.PUBLIC_URL, methods=UPLOAD_METHODS),
    )


@router.post("/signed", response_model=SignedUploadResponse)
def create_signed_upload(
    body: SignedUploadRequest,
    request: Request,
    current_user: Optional[User] = Depends(get_optional_user),
    config: Settings = Depends(get_settings),
    s3_service: S3Service = Depends(get_s3_service),
):
    """
    Generate presigned POST data for uploading one recording object.

    The key must live under the caller's own "<user_id>/" prefix, which is
    where the desktop app writes "<user_id>/<video_id>/<type>/<file>".
    """
    token = extract_bearer_token(request.headers.get("authorization"))
    headers = cors_headers(request, config.PUBLIC_URL, methods=UPLOAD_METHODS)

    if current_user is None:
        response = JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": True},
            headers=headers,
        )
    elif not body.fileKey.startswith(f"{current_user.id}/"):
        logger.warning("User %s requested upload outside own prefix: %s", current_user.id, body.fileKey)
        response = JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"error": "forbidden"},
            headers=headers,
        )
    else:
        post_data = s3_service.generate_presigned_post(body.fileKey, body.metadata())
        logger.info("Generated presigned POST for %s", body.fileKey)
        response = JSONResponse(
            status_code=status.HTTP_200_OK,
            content=SignedUploadResponse(presignedPostData=post_data).model_dump(),
            headers=headers,
        )

    if token:
        set_session_cookie(response, token)
    return response
