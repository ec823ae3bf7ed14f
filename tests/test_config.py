"""Tests for settings and logging setup."""

import logging

import pytest

from fitness_tracker.core.config import Settings
from fitness_tracker.core.logging import LOG_FILE_NAME, LOGGER_NAME, configure_logging
from fitness_tracker.db.session import build_engine


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = (logger.handlers[:], logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:], logger.level, logger.propagate = saved


# ============================================================================
# SETTINGS
# ============================================================================

def test_settings_defaults(monkeypatch) -> None:
    for name in ("DATABASE_URL", "LOG_LEVEL", "LOG_DIR", "PROJECT_NAME", "DEBUG"):
        monkeypatch.delenv(name, raising=False)

    config = Settings(_env_file=None)

    assert config.DATABASE_URL == "sqlite:///./fitness_tracker.db"
    assert config.LOG_LEVEL == "INFO"
    assert config.LOG_DIR == ""
    assert config.DEBUG is False


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("database_url", "sqlite:///:memory:")
    monkeypatch.setenv("DEBUG", "true")

    config = Settings(_env_file=None)

    assert config.DATABASE_URL == "sqlite:///:memory:"
    assert config.DEBUG is True


def test_build_engine_enables_sqlite_foreign_keys() -> None:
    engine = build_engine("sqlite://")
    try:
        with engine.connect() as conn:
            assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
    finally:
        engine.dispose()


# ============================================================================
# LOGGING
# ============================================================================

def test_configure_logging_console_only(clean_logger) -> None:
    logger = configure_logging(Settings(_env_file=None, LOG_LEVEL="debug", LOG_DIR=""))

    assert logger is clean_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_configure_logging_does_not_stack_handlers(clean_logger) -> None:
    config = Settings(_env_file=None, LOG_DIR="")

    configure_logging(config)
    configure_logging(config)

    assert len(clean_logger.handlers) == 1


def test_configure_logging_writes_file(clean_logger, tmp_path) -> None:
    log_dir = tmp_path / "logs"
    logger = configure_logging(Settings(_env_file=None, LOG_DIR=str(log_dir)))

    logging.getLogger(f"{LOGGER_NAME}.services.user_service").info("hello file")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "hello file" in (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8")


def test_configure_logging_falls_back_when_dir_unusable(clean_logger, tmp_path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")

    logger = configure_logging(Settings(_env_file=None, LOG_DIR=str(blocker / "logs")))

    assert len(logger.handlers) == 1
