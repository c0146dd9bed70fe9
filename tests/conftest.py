"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from httpx import Response
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from birdcards import models
from birdcards.core import container
from birdcards.database import Base, get_db
from birdcards.infrastructure.identity.auth.token_service import create_access_token
from birdcards.infrastructure.media.workers.image_cleanup_worker import ImageCleanupWorker
from birdcards.main import app

# Minimal payloads carrying real magic bytes
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 64
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
GIF_BYTES = b"GIF89a" + b"\x00" * 64
WEBP_BYTES = b"RIFF\x24\x00\x00\x00WEBPVP8 " + b"\x00" * 64


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """File-based SQLite so the cleanup worker thread sees the same data."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(db_engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def uploads_root(tmp_path: Path) -> Path:
    root = tmp_path / "uploads" / "flashcards"
    root.mkdir(parents=True)
    return root.resolve()


@pytest.fixture
def cleanup_worker(
    session_factory: sessionmaker[Session], uploads_root: Path
) -> Generator[ImageCleanupWorker, None, None]:
    worker = ImageCleanupWorker(session_factory=session_factory, uploads_root=uploads_root)
    try:
        yield worker
    finally:
        worker.shutdown()


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create the default authenticated user."""
    return create_test_user(db_session, email="birder@example.com", name="Test Birder")


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    """Create a second user who owns nothing of the default user."""
    return create_test_user(db_session, email="other@example.com", name="Other Birder")


@pytest.fixture
def test_deck(db_session: Session, test_user: models.User) -> models.Deck:
    return create_test_deck(db_session, user_id=test_user.id, name="Garden Birds")


@pytest.fixture
def other_deck(db_session: Session, other_user: models.User) -> models.Deck:
    return create_test_deck(db_session, user_id=other_user.id, name="Seabirds")


@pytest.fixture
def other_headers(other_user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture
def client(
    db_session: Session,
    test_user: models.User,
    uploads_root: Path,
    cleanup_worker: ImageCleanupWorker,
) -> Generator[TestClient, Any, None]:
    """Create a test client authenticated as test_user."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.uploads_root.override(providers.Object(uploads_root))
    container.image_cleanup_worker.override(providers.Object(cleanup_worker))

    headers = {"Authorization": f"Bearer {create_access_token(test_user.id)}"}
    try:
        with TestClient(app, headers=headers) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
        container.uploads_root.reset_override()
        container.image_cleanup_worker.reset_override()


@pytest.fixture
def anonymous_client(client: TestClient) -> TestClient:
    """Client without credentials, sharing the overrides of client."""
    return TestClient(app)


def create_test_user(db_session: Session, email: str, name: str) -> models.User:
    user = models.User(email=email, name=name)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def create_test_deck(db_session: Session, user_id: Any, name: str) -> models.Deck:
    deck = models.Deck(user_id=user_id, name=name)
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


def upload_image(
    client: TestClient,
    deck_id: Any,
    filename: str = "robin.jpg",
    content: bytes = JPEG_BYTES,
    content_type: str = "image/jpeg",
    **kwargs: Any,
) -> Response:
    """POST an image to the upload endpoint."""
    return client.post(
        f"/uploads/flashcards/{deck_id}",
        files={"image": (filename, content, content_type)},
        **kwargs,
    )
