import os

# Settings are loaded at import time and refuse to start without credentials
os.environ.setdefault("CLIENT_ID", "test-client-id")
os.environ.setdefault("CLIENT_SECRET", "test-client-secret")

import pytest
from fastapi.testclient import TestClient

from urlshortener.main import create_app
from urlshortener.db.registry import UrlRegistry
from urlshortener.services.shortener import URLService
from urlshortener.services.analytics import Analytics


@pytest.fixture
def app():
    """Creates a fresh application with an empty registry for each test."""
    return create_app()


@pytest.fixture
def client(app):
    """Creates a test client bound to the per-test application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registry():
    return UrlRegistry()


@pytest.fixture
def service(registry):
    return URLService(registry)


@pytest.fixture
def analytics(registry):
    return Analytics(registry)


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]
