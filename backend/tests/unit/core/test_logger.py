"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from exercise_library.core.logger import JSONFormatter, configure_logging, ensure_request_id


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    # Act
    configure_logging("DEBUG")

    # Assert
    assert logging.getLogger().level == logging.DEBUG
    assert len(logging.getLogger().handlers) == 1


def test_json_formatter_includes_known_extras() -> None:
    record = logging.LogRecord("exercise_library.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.exercise_id = 9
    record.request_id = "abc"
    record.unrelated = "dropped"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["exercise_id"] == 9
    assert payload["request_id"] == "abc"
    assert "unrelated" not in payload


def test_ensure_request_id_prefers_incoming_header(app) -> None:
    with app.test_request_context("/", headers={"X-Correlation-ID": "corr-1"}):
        assert ensure_request_id() == "corr-1"
        assert ensure_request_id() == "corr-1"


def test_ensure_request_id_is_stable_within_request(app) -> None:
    with app.test_request_context("/"):
        first = ensure_request_id()
        assert first
        assert ensure_request_id() == first
