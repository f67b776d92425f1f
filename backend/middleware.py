"""
Middleware Module
Cross-cutting concerns layered around the terminal handler.

Each factory takes the logger it writes to and returns a middleware
(see pipeline.Middleware).
"""

import traceback
from functools import wraps
from typing import Optional

from log_config import emit
from models.request_models import GatewayRequest
from models.response_models import GatewayResponse, internal_error_response
from pipeline import Handler, Middleware

# Logged when the request carries no usable source address
UNKNOWN_SOURCE_IP = "-"


def source_ip_of(request: Optional[GatewayRequest]) -> str:
    """Caller address from the request identity, or UNKNOWN_SOURCE_IP."""
    source_ip = getattr(request, "source_ip", None)
    if not isinstance(source_ip, str) or not source_ip.strip():
        return UNKNOWN_SOURCE_IP
    return source_ip.strip()


def logging_middleware(logger) -> Middleware:
    """
    Log the caller's source IP once per request.

    The inner pipeline runs first; the line is written afterwards whether it
    returned or raised. The result (or exception) passes through untouched.
    """
    def middleware(next_handler: Handler) -> Handler:
        @wraps(next_handler)
        def wrapper(request: GatewayRequest) -> GatewayResponse:
            try:
                return next_handler(request)
            finally:
                remote_addr = source_ip_of(request)
                emit(logger.info, f"remote_addr: {remote_addr}", remote_addr=remote_addr)
        return wrapper
    return middleware


def error_boundary(logger) -> Middleware:
    """
    Translate any exception from the inner pipeline into a 500 response.

    Install it outermost so every other middleware sees the failure first.
    """
    def middleware(next_handler: Handler) -> Handler:
        @wraps(next_handler)
        def wrapper(request: GatewayRequest) -> GatewayResponse:
            try:
                return next_handler(request)
            except Exception as e:
                emit(
                    logger.error,
                    "Unhandled exception in pipeline",
                    error=str(e),
                    error_type=type(e).__name__,
                    traceback=traceback.format_exc(),
                )
                return internal_error_response()
        return wrapper
    return middleware
