"""
Pytest configuration and global fixtures.
"""

import os

# Configure the environment before anything imports the settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["IMAGE_STORAGE_PROVIDER"] = "cloudinary"

import pytest
from fastapi.testclient import TestClient

from talkus.core.storage import ImageUploader, get_image_uploader
from talkus.db.base import Base
from talkus.db.session import SessionLocal, engine
from talkus.deps import get_post_service, get_user_service
from talkus.main import app
from talkus.modules.posts.repositories.post import PostRepository
from talkus.modules.posts.services.post import PostService
from talkus.modules.users.repositories.user import UserRepository
from talkus.modules.users.services.user import UserService

BOUNDARY = "talkus-test-boundary"


@pytest.fixture
def tables():
    """Create every table for the duration of a test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(tables):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def image_uploader(mocker):
    return mocker.Mock(spec=ImageUploader)


@pytest.fixture
def post_repository(mocker):
    return mocker.Mock(spec=PostRepository)


@pytest.fixture
def user_repository(mocker):
    return mocker.Mock(spec=UserRepository)


@pytest.fixture
def client(image_uploader):
    """Test client with the image host replaced by a mock."""
    app.dependency_overrides[get_image_uploader] = lambda: image_uploader
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def api_client(client, post_repository, user_repository):
    """Test client whose use cases run against mocked repositories."""
    app.dependency_overrides[get_post_service] = lambda: PostService(post_repository)
    app.dependency_overrides[get_user_service] = lambda: UserService(user_repository)
    return client


@pytest.fixture
def multipart():
    """Build a multipart/form-data body and its headers."""

    def build(fields=None, files=None):
        parts = []
        for name, value in (fields or {}).items():
            parts += [
                f"--{BOUNDARY}".encode(),
                f'Content-Disposition: form-data; name="{name}"'.encode(),
                b"",
                value.encode(),
            ]
        for name, (filename, data, content_type) in (files or {}).items():
            parts += [
                f"--{BOUNDARY}".encode(),
                f'Content-Disposition: form-data; name="{name}"; filename="{filename}"'.encode(),
                f"Content-Type: {content_type}".encode(),
                b"",
                data,
            ]
        parts += [f"--{BOUNDARY}--".encode(), b""]
        body = b"\r\n".join(parts)
        return body, {"Content-Type": f"multipart/form-data; boundary={BOUNDARY}"}

    return build
