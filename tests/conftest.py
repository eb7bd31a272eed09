"""Shared fixtures for the test suite."""

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from database import DatabaseManager
from api.config import Settings
from api.data_access import FirearmDataProvider
from api.main import create_app


@pytest.fixture
def tmp_db(tmp_path):
    """Fresh, empty DatabaseManager backed by a real SQLite DB in tmp_path."""
    db_path = str(tmp_path / "test.db")
    db = DatabaseManager(db_path=db_path)
    yield db
    db.close()


@pytest.fixture
def seeded_db(tmp_db):
    """tmp_db loaded with the reference dataset."""
    tmp_db.seed_firearms()
    return tmp_db


@pytest.fixture
def provider(seeded_db):
    return FirearmDataProvider(seeded_db)


@pytest.fixture
def make_settings(tmp_path):
    """Factory for Settings pointing at a database inside tmp_path."""
    def _make(**overrides):
        overrides.setdefault("DB_PATH", str(tmp_path / "api.db"))
        return Settings(**overrides)
    return _make


@pytest.fixture
def app(make_settings):
    application = create_app(make_settings())
    yield application
    application.state.provider.close()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_response():
    """Factory for mock HTTP responses."""
    def _make(status_code=200, json_data=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = json_data if json_data is not None else {}
        return resp
    return _make
