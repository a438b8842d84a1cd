"""
Unit tests for shared logging processors.
"""

from shared.logging import (
    add_correlation_context,
    add_service_context,
    add_timestamp,
    clear_context,
    request_id_var,
    set_request_id,
)


def test_service_taken_from_logger_name():
    event = add_service_context(None, "info", {"logger": "site.tag_cache", "event": "x"})

    assert event["service"] == "site"


def test_request_id_added_when_set():
    request_id = set_request_id()
    try:
        event = add_correlation_context(None, "info", {"event": "x"})
    finally:
        clear_context()

    assert event["request_id"] == request_id
    assert request_id_var.get() is None


def test_no_request_id_outside_request():
    assert "request_id" not in add_correlation_context(None, "info", {"event": "x"})


def test_epoch_timestamp_keeps_iso_timestamp():
    event = add_timestamp(None, "info", {"event": "x", "timestamp": "2025-03-07T18:30:00Z"})

    assert event["timestamp"] == "2025-03-07T18:30:00Z"
    assert isinstance(event["ts"], float)
