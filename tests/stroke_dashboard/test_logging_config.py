import logging

from pythonjsonlogger import jsonlogger

from stroke_dashboard.logging_config import configure_logging


def _restore(root, handlers, level):
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_json_by_default(monkeypatch):
    monkeypatch.delenv("STROKE_DASHBOARD_LOG_FORMAT", raising=False)
    root = logging.getLogger()
    saved, level = list(root.handlers), root.level
    try:
        configure_logging()

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
        assert root.level == logging.INFO
    finally:
        _restore(root, saved, level)


def test_configure_logging_plain_from_env(monkeypatch):
    monkeypatch.setenv("STROKE_DASHBOARD_LOG_FORMAT", "plain")
    root = logging.getLogger()
    saved, level = list(root.handlers), root.level
    try:
        configure_logging(level=logging.DEBUG)

        formatter = root.handlers[0].formatter
        assert not isinstance(formatter, jsonlogger.JsonFormatter)
        assert root.level == logging.DEBUG
    finally:
        _restore(root, saved, level)


def test_force_format_overrides_env(monkeypatch):
    monkeypatch.setenv("STROKE_DASHBOARD_LOG_FORMAT", "plain")
    root = logging.getLogger()
    saved, level = list(root.handlers), root.level
    try:
        configure_logging(force_format="json")

        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    finally:
        _restore(root, saved, level)


def test_reconfiguring_replaces_handler(monkeypatch):
    monkeypatch.delenv("STROKE_DASHBOARD_LOG_FORMAT", raising=False)
    root = logging.getLogger()
    saved, level = list(root.handlers), root.level
    try:
        configure_logging(force_format="plain")
        configure_logging()

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    finally:
        _restore(root, saved, level)
