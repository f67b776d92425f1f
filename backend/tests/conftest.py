"""
Shared fixtures: loggers whose output tests can inspect.
"""

import io
import logging

import pytest
import structlog
from structlog.testing import LogCapture


@pytest.fixture
def log_capture():
    """LogCapture collecting event dicts from the `capturing_logger` fixture."""
    return LogCapture()


@pytest.fixture
def capturing_logger(log_capture):
    return structlog.wrap_logger(
        None,
        processors=[log_capture],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def json_logger(log_stream):
    """Logger rendering one JSON line per event into `log_stream`."""
    return structlog.wrap_logger(
        structlog.PrintLogger(file=log_stream),
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )


def make_event(source_ip="203.0.113.5", **overrides):
    """Minimal REST API (v1) proxy event."""
    event = {
        "httpMethod": "GET",
        "path": "/",
        "headers": {"Accept": "application/json"},
        "queryStringParameters": None,
        "body": None,
        "isBase64Encoded": False,
        "requestContext": {
            "requestId": "req-1",
            "identity": {"sourceIp": source_ip, "userAgent": "pytest"},
        },
    }
    event.update(overrides)
    return event


@pytest.fixture
def event_factory():
    return make_event
