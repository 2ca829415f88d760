"""Tests for logging helpers."""

import logging

from common.logging_utils import configure_logging, is_debug_enabled


def test_configure_logging_level_from_env(monkeypatch):
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    try:
        monkeypatch.setenv("RNTA_LOG_LEVEL", "debug")
        configure_logging()
        configure_logging()
        assert root.level == logging.DEBUG
        assert sum(1 for h in root.handlers if getattr(h, "_rnta_handler", False)) == 1
        assert is_debug_enabled(logging.getLogger("configure_projects"))
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_explicit_level_wins(monkeypatch):
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    try:
        monkeypatch.setenv("RNTA_LOG_LEVEL", "debug")
        configure_logging("warning")
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

