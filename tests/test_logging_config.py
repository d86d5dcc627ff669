# File: /tests/test_logging_config.py | Version: 1.0 | Title: Logging setup
import json
import logging

from listview.core.logging import JsonConsole, configure_logging


def test_json_formatter_when_enabled(monkeypatch):
    monkeypatch.setenv("LOG_JSON", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    configure_logging()
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, JsonConsole) for h in root.handlers)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_json_console_output_shape():
    record = logging.LogRecord("listview.view.store", logging.ERROR, __file__, 1, "Failed %s", ("x",), None)
    out = json.loads(JsonConsole().format(record))
    assert out == {"level": "ERROR", "logger": "listview.view.store", "message": "Failed x"}


def test_plain_formatter_by_default(monkeypatch):
    monkeypatch.delenv("LOG_JSON", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    configure_logging()
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert not any(isinstance(h.formatter, JsonConsole) for h in root.handlers)
