"""
Pytest configuration and fixtures for Todo backend tests.
"""

import pytest
from fastapi.testclient import TestClient

from todo_backend.main import create_app
from todo_backend.settings import Settings

BASE_URL = "http://todo.test"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(
        base_url=BASE_URL,
        cors_allow_origins=["*"],
        host="127.0.0.1",
        port=5000,
        log_level="DEBUG",
    )


@pytest.fixture
def client(settings):
    """Test client for a fresh app; entering it runs the lifespan that starts the store."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
