"""
Structured logging for the gateway app.

JSON lines on stdout (CloudWatch picks them up as-is), with level, ISO
timestamp and service name on every line. Call configure_logging() once
during the Lambda init phase and hand get_logger() results to the
middleware that needs them.
"""

import logging
import os
import sys
from contextlib import suppress
from datetime import datetime, timezone
from typing import Any, Callable, Dict

import structlog

SERVICE_NAME = os.getenv("SERVICE_NAME", "gateway-app")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# json for Lambda, console for local development
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()


def _add_timestamp(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _add_service(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(force: bool = False) -> None:
    """Configure structlog once; later calls are no-ops unless force=True."""
    if structlog.is_configured() and not force:
        return

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _add_service,
    ]
    if LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("Request started", request_id=request_id)
    """
    return structlog.get_logger(name).bind(logger=name)


def emit(log_method: Callable[..., Any], event: str, **fields: Any) -> None:
    """
    Write one log line through a bound logger method, e.g. emit(logger.info, "msg").

    The sink is best-effort: a line lost to a closed or broken stream is
    dropped and never surfaces as a request failure.
    """
    with suppress(OSError, ValueError):
        log_method(event, **fields)
