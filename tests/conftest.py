"""
Shared pytest fixtures for the fake Redmine test suite.
"""
import logging

import pytest
from fastapi.testclient import TestClient

from fake_redmine.config.settings import Settings
from fake_redmine.server import create_app
from fake_redmine.utils.logging import configure_logging


# ── Logging ────────────────────────────────────────────────────────────────

@pytest.fixture(scope="session", autouse=True)
def configured_logging():
    """Route structlog through stdlib logging once, before caplog attaches."""
    configure_logging(Settings(log_level="DEBUG", log_json=False))


@pytest.fixture
def log_events(caplog):
    """
    Returns a callable listing captured structlog event dicts,
    optionally filtered by event name.
    """
    caplog.set_level(logging.INFO)

    def events(name=None):
        return [
            record.msg
            for record in caplog.records
            if isinstance(record.msg, dict) and (name is None or record.msg.get("event") == name)
        ]

    return events


@pytest.fixture
def request_log(log_events):
    """Returns a callable listing the ``request_handled`` entries captured so far."""
    return lambda: log_events("request_handled")


# ── App and clients ────────────────────────────────────────────────────────

@pytest.fixture
def test_settings():
    return Settings(server_name="fake-redmine-test", log_json=False)


@pytest.fixture
def app(test_settings):
    """A fresh application per test."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
