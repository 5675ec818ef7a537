"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from customer_images.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "customer_images.test", logging.INFO, __file__, 1, "Image added", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "customer_images.test"
    assert payload["message"] == "Image added"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(customer_id="c-1", image_id="i-1", unrelated="x"),
    ))
    assert payload["customer_id"] == "c-1"
    assert payload["image_id"] == "i-1"
    assert "unrelated" not in payload


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("DEBUG", "text")
        named = [h for h in root.handlers if h.get_name() == "customer_images"]
        assert len(named) == 1
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = original_handlers
        root.setLevel(original_level)
