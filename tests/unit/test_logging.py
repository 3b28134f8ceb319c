"""
Unit tests for utils/logging.py

configure_logging replaces the root handlers, so every test here restores
the session configuration afterwards.
"""
import json
import logging

import pytest

from fake_redmine.config.settings import Settings
from fake_redmine.utils.logging import (
    UVICORN_LOGGERS,
    build_handlers,
    build_processors,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_logging():
    yield
    for handler in logging.getLogger().handlers:
        handler.close()
    configure_logging(Settings(log_level="DEBUG", log_json=False))


# ── build_handlers ──────────────────────────────────────────────────────────

def test_console_handler_only_without_log_dir():
    handlers = build_handlers(Settings(), logging.Formatter())
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)


def test_file_handler_named_after_server(tmp_path):
    settings = Settings(server_name="redmine-ci", log_dir=tmp_path / "logs")
    handlers = build_handlers(settings, logging.Formatter())
    try:
        assert len(handlers) == 2
        assert handlers[1].baseFilename == str(tmp_path / "logs" / "redmine-ci.log")
    finally:
        for handler in handlers:
            handler.close()


# ── build_processors ────────────────────────────────────────────────────────

def test_processors_stamp_service_name():
    processors = build_processors(Settings(server_name="redmine-ci"))
    add_service = processors[1]
    assert add_service(None, "info", {"event": "x"}) == {"event": "x", "service": "redmine-ci"}


def test_service_does_not_override_explicit_value():
    add_service = build_processors(Settings(server_name="redmine-ci"))[1]
    assert add_service(None, "info", {"service": "other"})["service"] == "other"


# ── configure_logging ───────────────────────────────────────────────────────

def test_root_level_follows_settings(restore_logging):
    configure_logging(Settings(log_level="warning"))
    assert logging.getLogger().level == logging.WARNING


def test_uvicorn_loggers_propagate_to_root(restore_logging):
    configure_logging(Settings(log_level="ERROR"))
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        assert uvicorn_logger.handlers == []
        assert uvicorn_logger.propagate is True
        assert uvicorn_logger.level == logging.ERROR


def test_json_lines_written_to_log_file(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"
    configure_logging(Settings(server_name="redmine-ci", log_dir=log_dir, log_json=True))

    get_logger("fake_redmine.tests").info("file_check", answer=42)
    logging.getLogger("uvicorn.error").info("uvicorn says hi")
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = [json.loads(line) for line in (log_dir / "redmine-ci.log").read_text().splitlines()]
    ours = next(line for line in lines if line["event"] == "file_check")
    assert ours["answer"] == 42
    assert ours["service"] == "redmine-ci"
    assert ours["level"] == "info"

    foreign = next(line for line in lines if line["event"] == "uvicorn says hi")
    assert foreign["service"] == "redmine-ci"
    assert foreign["logger"] == "uvicorn.error"
