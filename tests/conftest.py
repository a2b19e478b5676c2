import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.routes.desktop import get_clock
from app.config import Settings, get_settings
from app.core.auth import create_session
from app.core.db import Base, get_db
from app.core.models import AuthSession, User
from app.main import app
from app.services.dub_service import get_dub_service


FIXED_NOW = datetime(2024, 3, 7, 15, 30)


class RecordingDubService:
    """Stands in for DubService and remembers which videos it was asked to link."""

    def __init__(self):
        self.calls = []

    async def create_link(self, video_id):
        self.calls.append(video_id)
        return {"key": video_id}


def make_settings(**overrides):
    values = {
        "DATABASE_URL": "sqlite://",
        "PUBLIC_URL": "https://cap.so",
        "CAP_AWS_REGION": "us-east-1",
        "CAP_AWS_BUCKET": "b1",
        "DUB_API_KEY": "dub-key",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def dub_service():
    return RecordingDubService()


@pytest.fixture
def client(db_session, settings, dub_service):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_dub_service] = lambda: dub_service
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def user(db_session):
    user = User(id="u1", email="u1@example.com", name="User One")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def session_token(db_session, user):
    return create_session(db_session, user).session_token


@pytest.fixture
def expired_token(db_session, user):
    auth_session = AuthSession(
        session_token="expired-token",
        user_id=user.id,
        expires=datetime.utcnow() - timedelta(minutes=1),
    )
    db_session.add(auth_session)
    db_session.commit()
    return auth_session.session_token
