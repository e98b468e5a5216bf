import json
import os
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

# Must be set before gallery.config is imported
os.environ["AWS_DEFAULT_REGION"] = "sa-east-1"
os.environ["AWS_REGION"] = "sa-east-1"
os.environ["POSTS_DDB"] = "test-posts"
os.environ["GALLERY_BUCKET"] = "test-gallery"
os.environ["GALLERY_PASSWORD"] = "s3cret"

from gallery.application.password import PasswordGuard  # noqa: E402
from gallery.domain.entities import Post  # noqa: E402


@pytest.fixture
def stored_post() -> Post:
    return Post(
        id="post-123",
        created_at="2024-01-15T10:00:00.000Z",
        title="Sunset",
        author="Ana",
        description="Beach at dusk",
        locale="Florianopolis",
        date_post="2024-01-14",
        url_image="https://test-gallery.s3.sa-east-1.amazonaws.com/key-abc",
        key_image="key-abc",
    )


@pytest.fixture
def stored_item(stored_post) -> dict:
    return stored_post.to_item()


@pytest.fixture
def mock_repository():
    return MagicMock()


@pytest.fixture
def mock_storage():
    storage = MagicMock()
    storage.put.side_effect = lambda key, body, content_type: f"https://test-gallery/{key}"
    return storage


@pytest.fixture
def password_guard() -> PasswordGuard:
    return PasswordGuard("s3cret")


@pytest.fixture
def lambda_context():
    return SimpleNamespace(aws_request_id="lambda-req-1")


@pytest.fixture
def make_event():
    """Build an API Gateway proxy event."""

    def _make(method: str, body: dict | None = None, post_id: str | None = None) -> dict:
        return {
            "httpMethod": method,
            "resource": "/posts/{id}" if post_id else "/posts",
            "pathParameters": {"id": post_id} if post_id else None,
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
            "requestContext": {"requestId": "api-req-1"},
        }

    return _make
