# tests/conftest.py

from __future__ import annotations

import os

# Settings are read at import time, so the environment has to be ready first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "local"
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("GOOGLE_CLIENT_ID", "test-client-id")
os.environ.setdefault("GOOGLE_CLIENT_SECRET", "test-client-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.security import create_access_token
from app.db.session import Base, get_db
from app.db.models import Label, User


@pytest.fixture()
def engine():
    """
    One in-memory SQLite database per test, shared across threads through
    StaticPool. Foreign keys are switched on so association inserts can fail
    the way they would against Postgres.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine) -> Session:
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db: Session) -> TestClient:
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def user(db: Session) -> User:
    user = User(email="eshada@example.com", name="Eshada", auth_provider="google", provider_user_id="g-1")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def other_user(db: Session) -> User:
    user = User(email="someone@example.com", name="Someone", auth_provider="google", provider_user_id="g-2")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def bearer_for(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user.email})}"}


@pytest.fixture()
def auth_headers(user: User) -> dict:
    return bearer_for(user)


@pytest.fixture()
def labels(db: Session) -> list[Label]:
    rows = [Label(name="Home", color="34 197 94"), Label(name="Work", color="239 68 68")]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows


@pytest.fixture()
def reject_writes(db: Session, monkeypatch):
    """Call the returned function to make every later commit fail."""
    def arm():
        def commit():
            raise SQLAlchemyError("write rejected")

        monkeypatch.setattr(db, "commit", commit)

    return arm
