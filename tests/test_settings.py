"""Tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from taskdeck.config import Settings
from taskdeck.logging import setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        for name in ("TASKDECK_PROJECT_ROOT", "TASKDECK_ID_SCHEME", "TASKDECK_VERBOSE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.id_scheme == "sequential"
        assert settings.verbose == 0
        assert settings.log_file is None

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("TASKDECK_PROJECT_ROOT", str(tmp_path))
        monkeypatch.setenv("TASKDECK_ID_SCHEME", "uuid")

        settings = Settings()

        assert settings.project_root == tmp_path
        assert settings.id_scheme == "uuid"

    def test_invalid_id_scheme(self):
        with pytest.raises(ValidationError):
            Settings(id_scheme="timestamp")


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _reset_logger(self):
        logger = logging.getLogger("taskdeck")
        handlers, level = list(logger.handlers), logger.level
        yield
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)

    def test_noop_when_quiet(self):
        before = list(logging.getLogger("taskdeck").handlers)
        setup_logging(0, None)
        assert logging.getLogger("taskdeck").handlers == before

    def test_debug_level(self):
        setup_logging(2)
        assert logging.getLogger("taskdeck").level == logging.DEBUG

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "taskdeck.log"

        setup_logging(0, log_file)
        logging.getLogger("taskdeck.test").info("hello")
        for handler in logging.getLogger("taskdeck").handlers:
            handler.flush()

        assert "hello" in log_file.read_text()
        assert "taskdeck starting" in log_file.read_text()
