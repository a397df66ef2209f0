"""Shared fixtures: in-memory database and a FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db is overridden so routes use that database
    - bcrypt runs at minimum cost to keep the suite fast
"""

import os

# Must be set before qa_forum.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from qa_forum.database import Base, get_db, init_db
from qa_forum.main import app

PASSWORD = "secret123"


def register_payload(**overrides):
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "password": PASSWORD,
        "confirmPassword": PASSWORD,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def test_engine():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def count_rows(session_factory):
    """Count rows of a model through a fresh session."""
    def _count(model):
        session = session_factory()
        try:
            return session.query(model).count()
        finally:
            session.close()
    return _count


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    res = client.post("/register", json=register_payload())
    assert res.status_code == 201
    return res.json()


@pytest.fixture
def auth_headers(registered_user):
    return {"Authorization": f"Bearer {registered_user['token']}"}


@pytest.fixture
def question_id(client, auth_headers):
    res = client.post(
        "/questions",
        json={"title": "How do pools work?", "description": "Connection pools, explained."},
        headers=auth_headers,
    )
    assert res.status_code == 201
    return res.json()["data"]["id"]
