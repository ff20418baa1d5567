"""
Pytest configuration and fixtures for integration tests.
"""

import os
import sys
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def settings():
    """Settings with no database configured."""
    from app.config import Settings
    return Settings(port=3001, database_url=None)


@pytest.fixture(scope="function")
def client(settings):
    """
    Create a test client for a freshly built app.
    The with-block runs the app lifespan (startup and shutdown).
    """
    from app.main import create_app
    from fastapi.testclient import TestClient

    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear service variables and run from an empty directory (no .env)."""
    for name in ("PORT", "DATABASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
