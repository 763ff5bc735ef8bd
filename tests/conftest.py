"""
Shared fixtures: injected settings, a patched upstream, and a test client.
"""

import json
from collections.abc import Iterator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app

API_KEY = "test-key"


def make_response(status: int, body: Any = None, *, raw: bytes | None = None) -> requests.Response:
    """Build a real ``requests.Response`` with a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status
    response.headers["Content-Type"] = "application/json"
    response._content = raw if raw is not None else json.dumps(body).encode()
    return response


@pytest.fixture
def settings() -> Settings:
    return Settings(perplexity_api_key=API_KEY)


@pytest.fixture
def mock_post() -> Iterator[MagicMock]:
    """Patch the outbound POST so no test ever reaches the network."""
    with patch("app.services.perplexity.requests.post") as mocked:
        yield mocked


@pytest.fixture
def client(settings: Settings, mock_post: MagicMock) -> Iterator[TestClient]:
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
