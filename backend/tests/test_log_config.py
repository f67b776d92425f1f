"""
Tests for log_config.py — structlog setup.
"""

from unittest.mock import patch

import pytest
import structlog

import log_config


class TestConfigureLogging:
    def test_idempotent_without_force(self):
        log_config.configure_logging()
        with patch.object(log_config.structlog, "configure") as mock_configure:
            log_config.configure_logging()
        mock_configure.assert_not_called()

    def test_force_reconfigures(self):
        with patch.object(log_config.structlog, "configure") as mock_configure:
            log_config.configure_logging(force=True)
        mock_configure.assert_called_once()
        processors = mock_configure.call_args.kwargs["processors"]
        assert structlog.contextvars.merge_contextvars in processors


class TestProcessors:
    def test_add_service(self):
        assert log_config._add_service(None, "info", {})["service"] == log_config.SERVICE_NAME

    def test_add_timestamp_keeps_existing(self):
        assert log_config._add_timestamp(None, "info", {"timestamp": "t"})["timestamp"] == "t"

    def test_add_timestamp_iso(self):
        assert "T" in log_config._add_timestamp(None, "info", {})["timestamp"]


class TestEmit:
    def test_passes_fields_through(self):
        calls = []
        log_config.emit(lambda event, **fields: calls.append((event, fields)), "hello", a=1)
        assert calls == [("hello", {"a": 1})]

    def test_closed_stream_is_dropped(self, json_logger, log_stream):
        log_stream.close()
        log_config.emit(json_logger.info, "lost line", remote_addr="203.0.113.5")

    def test_other_errors_propagate(self):
        def broken(event, **fields):
            raise KeyError("not a sink error")

        with pytest.raises(KeyError):
            log_config.emit(broken, "x")
