"""Shared fixtures: every test gets its own SQLite file."""

import pytest
from fastapi.testclient import TestClient

from hospital_roster.api.server import app
from hospital_roster.config.settings import settings
from hospital_roster.database.db import get_engine, get_session_factory, init_database


@pytest.fixture
def engine(tmp_path):
    engine = get_engine(f"sqlite:///{tmp_path / 'roster.db'}")
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    session = get_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{tmp_path / 'api.db'}")
    with TestClient(app) as client:
        yield client
