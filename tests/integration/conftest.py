"""Shared fixtures for integration tests."""

import pytest
from fastapi.testclient import TestClient

from morphtags.api.main import create_app
from morphtags.config import Settings


@pytest.fixture
def client():
    """Test client over an app with default settings."""
    app = create_app(Settings())
    with TestClient(app) as test_client:
        yield test_client
