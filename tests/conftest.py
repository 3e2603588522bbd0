"""Shared fixtures.

Qt tests run offscreen; they are skipped when PySide6 is not importable.
"""
from __future__ import annotations

import os

import pytest

from doodle.core.sink import RecordingSink


@pytest.fixture
def sink():
    """A fresh RecordingSink."""
    return RecordingSink()


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session (offscreen platform)."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def no_settings(tmp_path, monkeypatch):
    """Run from an empty folder so no doodle_settings.json is picked up."""
    monkeypatch.chdir(tmp_path)
    for key in ("DOODLE_CANVAS_W", "DOODLE_CANVAS_H", "DOODLE_FRAME_MS", "DOODLE_BACKGROUND"):
        monkeypatch.delenv(key, raising=False)
    return tmp_path
