# File: tests/conftest.py

import os

# Settings read the environment at import time.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret-key-long-enough-for-hs256-signing"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from library_membership.api.deps import get_db
from library_membership.core.security import create_access_token
from library_membership.db.init_db import init_db
from library_membership.main import app
from library_membership.models.base import Base
from library_membership.services import library_service, user_service

DEFAULT_PASSWORD = "correct horse battery"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(email: str, password: str = DEFAULT_PASSWORD):
        return user_service.register_user(db, email=email, password=password)

    return _make_user


@pytest.fixture
def make_library(db):
    def _make_library(name: str, floor_count: int = 1, floor_area=None):
        return library_service.create_library(
            db, name=name, floor_count=floor_count, floor_area=floor_area
        )

    return _make_library


@pytest.fixture
def auth_headers():
    def _auth_headers(user) -> dict:
        token = create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
