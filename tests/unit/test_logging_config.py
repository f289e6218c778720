"""Unit tests for logging setup."""

import json
import logging

import pytest

from movie_api.logging_config import (
    ACCESS_LOGGER,
    JsonFormatter,
    RequestIdFilter,
    configure_logging,
    request_id_var,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("movie_api.test", logging.INFO, __file__, 1, "Login failed", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger(ACCESS_LOGGER).setLevel(logging.NOTSET)


def test_json_lines_carry_request_id_and_extras():
    token = request_id_var.set("req-42")
    try:
        record = _record(username="alice01", duration_ms=3.5)
        RequestIdFilter().filter(record)
    finally:
        request_id_var.reset(token)

    line = json.loads(JsonFormatter().format(record))

    assert line["message"] == "Login failed"
    assert line["request_id"] == "req-42"
    assert line["username"] == "alice01"
    assert line["duration_ms"] == 3.5


def test_outside_a_request_request_id_is_dash():
    record = _record()
    RequestIdFilter().filter(record)

    assert record.request_id == "-"
    assert "request_id" not in json.loads(JsonFormatter().format(record))


def test_production_uses_json(restore_root_logger):
    configure_logging(environment="production")

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JsonFormatter)


def test_access_log_can_be_silenced(restore_root_logger):
    configure_logging(access_log=False)
    assert not logging.getLogger(ACCESS_LOGGER).isEnabledFor(logging.INFO)

    configure_logging(access_log=True)
    assert logging.getLogger(ACCESS_LOGGER).isEnabledFor(logging.INFO)
