"""Tests for request id sanitization and the logging filter."""

import logging

from app.middleware.request_id import REQUEST_ID_MAX_LENGTH, sanitize_request_id
from app.shared.context import get_request_id, reset_request_id, set_request_id
from app.shared.telemetry.logging import RequestIdFilter


def test_valid_request_id_kept() -> None:
    assert sanitize_request_id("abc-123_X") == "abc-123_X"


def test_surrounding_whitespace_stripped() -> None:
    assert sanitize_request_id("  abc  ") == "abc"


def test_missing_request_id_generated() -> None:
    generated = sanitize_request_id(None)
    assert len(generated) == 32
    assert generated != sanitize_request_id(None)


def test_unsafe_characters_replaced() -> None:
    assert sanitize_request_id("bad\nid") != "bad\nid"


def test_too_long_replaced() -> None:
    raw = "a" * (REQUEST_ID_MAX_LENGTH + 1)
    assert sanitize_request_id(raw) != raw


def test_filter_injects_context_request_id() -> None:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    token = set_request_id("req-1")
    try:
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "req-1"
    finally:
        reset_request_id(token)
    assert get_request_id() is None


def test_filter_outside_request_uses_dash() -> None:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    RequestIdFilter().filter(record)
    assert record.request_id == "-"
