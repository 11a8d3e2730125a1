"""Pytest configuration and shared fixtures."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from fastapi.testclient import TestClient

from backend.config import Settings, get_settings
from backend.main import app


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables and dependency overrides after each test."""
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Test client against the app with default settings."""
    app.dependency_overrides[get_settings] = lambda: Settings()
    return TestClient(app)


@pytest.fixture
def configure(client):
    """Swap the settings the routes see, e.g. configure(e_series="E24")."""
    def _configure(**overrides):
        app.dependency_overrides[get_settings] = lambda: Settings(**overrides)
    return _configure
