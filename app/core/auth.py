"""Session authentication: bearer-to-cookie bridge and session lookup."""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.core.models import AuthSession, User


logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "next-auth.session-token"
SESSION_MAX_AGE = timedelta(days=30)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the second space-separated part of an Authorization header, if any."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def set_session_cookie(response: Response, token: str) -> None:
    """Store a bearer token as the session cookie so later requests can use cookie auth."""
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        path="/",
        samesite="none",
        secure=True,
        httponly=True,
    )


def resolve_session_user(db: Session, session_token: Optional[str]) -> Optional[User]:
    """Look up the user owning an unexpired session token."""
    if not session_token:
        return None

    auth_session = (
        db.query(AuthSession)
        .filter(AuthSession.session_token == session_token)
        .first()
    )
    if not auth_session:
        return None
    if auth_session.expires <= datetime.utcnow():
        logger.info("Session for user %s has expired", auth_session.user_id)
        return None
    return auth_session.user


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    """Resolve the current user from a bearer token, falling back to the session cookie."""
    token = extract_bearer_token(request.headers.get("authorization"))
    if token is None:
        token = request.cookies.get(SESSION_COOKIE_NAME)
    return resolve_session_user(db, token)


def create_session(db: Session, user: User, max_age: timedelta = SESSION_MAX_AGE) -> AuthSession:
    """Issue a new session token for a user."""
    auth_session = AuthSession(
        session_token=secrets.token_urlsafe(32),
        user_id=user.id,
        expires=datetime.utcnow() + max_age,
    )
    db.add(auth_session)
    db.commit()
    db.refresh(auth_session)
    return auth_session
