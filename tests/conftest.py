import pytest
from fastapi.testclient import TestClient

from contact_manager.app.core.config import settings
from contact_manager.app.core.db import init_db
from contact_manager.app.main import app


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Point the store at a fresh SQLite file for each test."""
    path = tmp_path / "contacts.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db):
    with TestClient(app) as test_client:
        yield test_client
