"""Desktop app routes: create a video record before uploading a recording."""

import logging
from datetime import datetime
from typing import Callable, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.schemas.videos import CreateVideoResponse
from app.config import Settings, get_settings
from app.core.auth import extract_bearer_token, get_optional_user, set_session_cookie
from app.core.cors import cors_headers
from app.core.db import get_db
from app.core.ids import get_id_generator
from app.core.models import User, Video
from app.services.dub_service import DubService, get_dub_service
from app.utils.recording_name import recording_name


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/desktop", tags=["desktop"])


def get_clock() -> Callable[[], datetime]:
    """Dependency returning the clock used to name recordings."""
    return datetime.now


@router.options("/video/create")
def create_video_preflight(request: Request, config: Settings = Depends(get_settings)):
    """CORS preflight. No authentication and no side effects."""
    return Response(
        status_code=status.HTTP_200_OK,
        headers=cors_headers(request, config.PUBLIC_URL),
    )


@router.get("/video/create", response_model=CreateVideoResponse)
def create_video(
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings),
    generate_id: Callable[[], str] = Depends(get_id_generator),
    clock: Callable[[], datetime] = Depends(get_clock),
    dub_service: DubService = Depends(get_dub_service),
):
    """
    Create a video owned by the current user and return where to upload it.

    A bearer token in the Authorization header is also stored as the session
    cookie, so the desktop app's later requests authenticate by cookie.
    """
    token = extract_bearer_token(request.headers.get("authorization"))
    headers = cors_headers(request, config.PUBLIC_URL)

    logger.debug("Request cookies: %s", sorted(request.cookies.keys()))

    if current_user is None:
        response = JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": True},
            headers=headers,
        )
        if token:
            set_session_cookie(response, token)
        return response

    video_id = generate_id()
    video = Video(
        id=video_id,
        name=recording_name(clock()),
        owner_id=current_user.id,
        aws_region=config.CAP_AWS_REGION,
        aws_bucket=config.CAP_AWS_BUCKET,
    )
    try:
        db.add(video)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error creating video for user %s: %s", current_user.id, e)
        raise
    logger.info("Created video %s for user %s", video_id, current_user.id)

    if config.is_hosted_production:
        background_tasks.add_task(dub_service.create_link, video_id)

    body = CreateVideoResponse(
        id=video_id,
        user_id=current_user.id,
        aws_region=config.CAP_AWS_REGION,
        aws_bucket=config.CAP_AWS_BUCKET,
    )
    response = JSONResponse(
        status_code=status.HTTP_200_OK,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )
    if token:
        set_session_cookie(response, token)
    return response
