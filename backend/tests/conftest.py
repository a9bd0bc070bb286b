"""Shared fixtures: in-memory store, app wired to it, token minting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from lms_backend.config import Settings
from lms_backend.database import init_db
from lms_backend.main import create_app
from lms_backend.models import User, UserRole

TEST_SECRET = "test-secret"
BASE_TIME = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", auth_jwt_secret=TEST_SECRET, max_upload_bytes=1024 * 1024)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def app(settings, engine):
    return create_app(settings, engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_token() -> Callable[..., str]:
    def _make(sub: str, email: str = "") -> str:
        claims = {"sub": sub, "exp": datetime.now(timezone.utc) + timedelta(hours=1)}
        if email:
            claims["email"] = email
        return jwt.encode(claims, TEST_SECRET, algorithm="HS256")

    return _make


@pytest.fixture
def auth_headers(make_token) -> Callable[..., Dict[str, str]]:
    def _headers(sub: str, email: str = "") -> Dict[str, str]:
        return {"Authorization": f"Bearer {make_token(sub, email)}"}

    return _headers


@pytest.fixture
def add_user(engine) -> Callable[..., int]:
    """Insert a user and return its id; ``minutes`` offsets created_at from a fixed base."""

    def _add(external_id: str, role: UserRole = UserRole.USER, minutes: int = 0, email: str = "") -> int:
        with Session(engine) as session:
            user = User(
                external_id=external_id,
                email=email or f"{external_id}@example.com",
                role=role,
                created_at=BASE_TIME + timedelta(minutes=minutes),
            )
            session.add(user)
            session.commit()
            session.refresh(user)
            return user.id

    return _add


@pytest.fixture
def get_user(engine) -> Callable[[int], User]:
    def _get(user_id: int) -> User:
        with Session(engine) as session:
            return session.get(User, user_id)

    return _get
