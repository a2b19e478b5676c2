"""Database models"""

import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    Column,
    String,
    ForeignKey,
    DateTime,
)
from sqlalchemy.orm import relationship

from app.core.db import Base


class User(Base):
    """Service-level user."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, nullable=True, unique=True)
    name = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    sessions = relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")
    videos = relationship("Video", back_populates="owner")


class AuthSession(Base):
    """Login session keyed by the token carried in the session cookie."""

    __tablename__ = "sessions"

    session_token = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    expires = Column(DateTime, nullable=False)

    user = relationship("User", back_populates="sessions")


class Video(Base):
    """A recording created by the desktop app. Content is uploaded to S3 afterwards."""

    __tablename__ = "videos"

    id = Column(String(15), primary_key=True)
    owner_id = Column(String, ForeignKey("users.id"), nullable=False)
    name = Column(String, nullable=False, default="My Video")
    aws_region = Column(String, nullable=True)
    aws_bucket = Column(String, nullable=True)
    public = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="videos")
