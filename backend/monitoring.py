"""
Request monitoring for the gateway app.

Latency is written as a structured log line (metric=<name>), so a
CloudWatch metric filter can turn it into a metric without any client
calls from the function. Failed requests carry an error_type dimension on
the same line.
"""

import time
from contextlib import contextmanager
from functools import wraps

from log_config import emit
from models.request_models import GatewayRequest
from models.response_models import GatewayResponse
from pipeline import Handler, Middleware


# ============================================
# Metric Names (Constants)
# ============================================

class MetricName:
    REQUEST_LATENCY = "RequestLatencyMs"


# ============================================
# Context Managers & Middleware
# ============================================

@contextmanager
def measure_latency(logger, metric_name: str, **dimensions):
    """
    Context manager to measure and log latency.

    Yields the dimensions dict; entries added inside the block are logged too.

    Usage:
        with measure_latency(logger, MetricName.REQUEST_LATENCY) as dims:
            response = next_handler(request)
    """
    start = time.perf_counter()
    try:
        yield dimensions
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        emit(logger.info, "latency", metric=metric_name, duration_ms=round(duration_ms, 3), **dimensions)


def latency_middleware(logger) -> Middleware:
    """Time every request; failures are tagged with their error_type and re-raised."""
    def middleware(next_handler: Handler) -> Handler:
        @wraps(next_handler)
        def wrapper(request: GatewayRequest) -> GatewayResponse:
            with measure_latency(logger, MetricName.REQUEST_LATENCY) as dimensions:
                try:
                    return next_handler(request)
                except Exception as e:
                    dimensions["error_type"] = type(e).__name__
                    raise
        return wrapper
    return middleware
