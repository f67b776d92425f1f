"""
Lambda Handler - entry point for the API Gateway proxy integration.

Cold Start Optimization:
- Logging is configured and the pipeline is composed once, at module level
  (during the init phase), and reused by every invocation.
"""
import time
_init_start = time.time()

from typing import Any, Dict, Mapping, Optional  # noqa: E402

import structlog  # noqa: E402

from app_handler import handle  # noqa: E402
from log_config import configure_logging, emit, get_logger  # noqa: E402
from middleware import error_boundary, logging_middleware  # noqa: E402
from models.request_models import GatewayRequest  # noqa: E402
from monitoring import latency_middleware  # noqa: E402
from pipeline import Handler, Pipeline  # noqa: E402

configure_logging()
logger = get_logger("lambda_handler")


def build_pipeline(log, terminal: Handler = handle) -> Handler:
    """Entry-point pipeline: error boundary, source IP logging, latency, then the handler."""
    return (
        Pipeline(terminal)
        .use(error_boundary(log))
        .use(logging_middleware(log))
        .use(latency_middleware(log))
        .build()
    )


pipeline = build_pipeline(logger)

_init_ms = int((time.time() - _init_start) * 1000)
emit(logger.info, f"Lambda init completed in {_init_ms}ms", init_ms=_init_ms)


def process_event(event: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Run one proxy event through the pipeline and return the proxy response dict."""
    request = GatewayRequest.from_event(event)
    return pipeline(request).to_proxy_dict()


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request_id = getattr(context, "aws_request_id", None)
    if request_id is None:
        return process_event(event)
    with structlog.contextvars.bound_contextvars(aws_request_id=request_id):
        return process_event(event)
