"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from gyrolaser.app import App
from gyrolaser.config import Config
from gyrolaser.core.modules.session.service import SessionService
from gyrolaser.web.server import create_fastapi_app


@pytest.fixture
def config():
    """Create a config that ignores the environment and any .env file."""
    return Config(_env_file=None, host="127.0.0.1", port=3000, debug=True, cors_origins=[])


@pytest.fixture
def session_service():
    """Create a fresh, empty session store."""
    return SessionService()


@pytest.fixture
def client(config):
    """Create a test client with the application lifespan entered."""
    fastapi_app = create_fastapi_app(App(config), config)
    with TestClient(fastapi_app) as test_client:
        yield test_client
