"""Structured Logging: JSONFormatter output shape."""

import json
import logging

from bookmanager.infrastructure.observability import (
    HANDLER_NAME, JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "bookmanager.services.book_manager", logging.WARNING,
        __file__, 1, "Book update rejected", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "bookmanager.services.book_manager"
    assert payload["message"] == "Book update rejected"
    assert "timestamp" in payload


def test_json_formatter_includes_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(book_id=5, error_code="illegal_transition", unrelated="x"),
    ))
    assert payload["book_id"] == 5
    assert payload["error_code"] == "illegal_transition"
    assert "unrelated" not in payload


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    level = root.level
    try:
        setup_logging("warning", "text")
        handler = setup_logging("debug", "json")
        ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert ours == [handler]
        assert isinstance(handler.formatter, JSONFormatter)
        assert root.level == logging.DEBUG
    finally:
        for h in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
            root.removeHandler(h)
        root.setLevel(level)
