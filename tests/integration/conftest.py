"""Shared fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from versenotes.api.main import app
from versenotes.api.routes import get_service
from versenotes.config import BACKEND_MEMORY, Settings
from versenotes.service import BibleService


@pytest.fixture
def api_service():
    """Initialized in-memory service seeded with the demo corpus."""
    service = BibleService(Settings(backend=BACKEND_MEMORY))
    service.initialize()
    return service


@pytest.fixture
def api_client(api_service):
    """Test client wired to ``api_service``."""
    app.dependency_overrides[get_service] = lambda: api_service
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def disabled_client(tmp_path):
    """Test client whose service failed to initialize."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    service = BibleService(Settings(db_path=blocker / "verses.db"))
    service.initialize()

    app.dependency_overrides[get_service] = lambda: service
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
