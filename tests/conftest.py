"""Shared pytest fixtures and configuration."""

from datetime import datetime, timedelta, timezone

import pytest
from loguru import logger

from ego.session import SessionManager, SessionStore


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks the CLI installs so they never outlive a captured stream."""
    yield
    logger.remove()


@pytest.fixture
def project_dir(tmp_path):
    """An empty project directory, separate from the data directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point ego's data directory at a temporary location."""
    path = tmp_path / "data"
    monkeypatch.setenv("EGO_DATA_DIR", str(path))
    return path


@pytest.fixture
def store(tmp_path):
    return SessionStore(tmp_path / "data" / "session.json")


class FakeClock:
    """Deterministic clock that advances only when told to."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manager(store, clock):
    return SessionManager(store, clock=clock)

