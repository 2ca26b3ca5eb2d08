"""Structured Logging: JSON formatter output and setup idempotence."""

import json
import logging

from restaurant_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "restaurant_api.test", logging.INFO, __file__, 1,
        "Restaurant created: %s", ("Roma",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_emits_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "restaurant_api.test"
    assert log["message"] == "Restaurant created: Roma"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(
        _record(restaurant_name="Roma", restaurant_id=7, unrelated="x"),
    ))
    assert log["restaurant_name"] == "Roma"
    assert log["restaurant_id"] == 7
    assert "unrelated" not in log


def test_setup_logging_replaces_previous_handler():
    before = list(logging.root.handlers)
    before_level = logging.root.level
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(second)
        logging.root.setLevel(before_level)
        for handler in before:
            if handler not in logging.root.handlers:
                logging.root.addHandler(handler)
