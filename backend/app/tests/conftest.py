"""
Shared test fixtures.

The database URL must be set before any app module is imported, since the
engine is created at import time.
"""
import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="connectsphere-test-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from app.core.security import create_access_token, get_password_hash
from app.db.base import Base
from app.db.session import SessionLocal, engine, init_db
from app.main import app
from app.services import user_service

TEST_PASSWORD = "password123"
_password_hash = None


def password_hash() -> str:
    """bcrypt is slow, so hash the shared test password once."""
    global _password_hash
    if _password_hash is None:
        _password_hash = get_password_hash(TEST_PASSWORD)
    return _password_hash


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh schema for every test."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db):
    """Create a user directly in storage and return it."""
    def _make(username, display_name=None, email=None):
        return user_service.create_user(
            db,
            username=username,
            display_name=display_name or username,
            email=email or f"{username}@example.com",
            hashed_password=password_hash()
        )
    return _make


@pytest.fixture
def token_for():
    def _token(user):
        return create_access_token(user.id, user.email)
    return _token
