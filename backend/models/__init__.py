"""
Gateway App Pydantic Models Package
Request/response models shared by the pipeline and its entry points.
"""

from models.request_models import (  # noqa: F401
    GatewayRequest,
    RequestIdentity,
)

from models.response_models import (  # noqa: F401
    GatewayResponse,
    internal_error_response,
    json_headers,
)
