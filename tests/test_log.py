"""Tests for doodle.utils.log."""
from __future__ import annotations

import logging

import pytest

from doodle.utils import log as doodle_log


@pytest.fixture
def fresh_logging(monkeypatch):
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    monkeypatch.setattr(doodle_log, "_LOGGER_CONFIGURED", False)
    yield root
    for h in root.handlers[:]:
        if h not in before and type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


class TestSetupLogging:
    def test_writes_log_file(self, fresh_logging, tmp_path):
        doodle_log.setup_logging(tmp_path / "logs")
        doodle_log.get_logger("doodle.test").info("hello file")
        for h in fresh_logging.handlers:
            h.flush()
        text = (tmp_path / "logs" / doodle_log.LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "hello file" in text

    def test_configures_once(self, fresh_logging, tmp_path):
        doodle_log.setup_logging(tmp_path)
        count = len(fresh_logging.handlers)
        doodle_log.setup_logging(tmp_path)
        assert len(fresh_logging.handlers) == count

    def test_unusable_log_dir_keeps_console(self, fresh_logging, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        before = len(fresh_logging.handlers)
        doodle_log.setup_logging(blocker / "logs")
        assert len(fresh_logging.handlers) == before + 1
