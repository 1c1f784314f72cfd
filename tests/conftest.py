# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tenet_feed.core.security import create_access_token
from tenet_feed.db.session import Base
from tenet_feed.db.session import get_db as app_get_session
from tenet_feed.main import app as fastapi_app
from tenet_feed.models import Post, User

TEST_DB_URL = "sqlite://"

_POST_SECONDS = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record) -> None:  # pragma: no cover
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

        # Ensure each test sees a clean database since services commit.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def make_user(db: Session, username: str) -> User:
    """Persist a provisioned profile the way the provisioning function would."""
    handle = f"{username}.tenetapp.space"
    user = User(
        uid=f"uid-{username}",
        handle=handle,
        did=f"did:plc:{handle}:1700000000000",
        name=username.title(),
        provision_status="provisioned",
    )
    db.add(user)
    db.commit()
    return user


def make_post(db: Session, author: User, content: str = "A perfectly ordinary post", **fields) -> Post:
    """Insert a post directly, spacing creation times one second apart."""
    post = Post(
        author_uid=author.uid,
        author_did=author.did,
        author_handle=author.handle,
        content=content,
        created_at=datetime.now(UTC) + timedelta(seconds=next(_POST_SECONDS)),
        **fields,
    )
    db.add(post)
    db.commit()
    return post


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.uid)}"}


@pytest.fixture()
def test_user(db_session: Session) -> User:
    """Create and return the primary test user."""
    return make_user(db_session, "alice")


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Create and return a second test user."""
    return make_user(db_session, "bob")


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return auth_headers(test_user)


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return auth_headers(other_user)


@pytest.fixture()
def test_post(db_session: Session, test_user: User) -> Post:
    """Create a baseline post authored by the primary test user."""
    return make_post(db_session, test_user)


@pytest.fixture()
def user_factory(db_session: Session):
    """Return a callable that provisions extra users by username."""
    return lambda username: make_user(db_session, username)


@pytest.fixture()
def post_factory(db_session: Session):
    """Return a callable that inserts posts for a given author."""
    return lambda author, content="A perfectly ordinary post", **fields: make_post(
        db_session, author, content, **fields
    )
