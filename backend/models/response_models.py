"""
Response models for the gateway app.
"""

import json
from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field

JSON_CONTENT_TYPE = "application/json"


def json_headers() -> Dict[str, str]:
    return {"Content-Type": JSON_CONTENT_TYPE}


class GatewayResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int = 200
    headers: Dict[str, str] = Field(default_factory=json_headers)
    body: str = ""
    is_base64_encoded: bool = False

    def to_proxy_dict(self) -> Dict[str, Any]:
        """Serialize to the shape API Gateway expects back from a proxy integration."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
            "isBase64Encoded": self.is_base64_encoded,
        }


def internal_error_response() -> GatewayResponse:
    """500 response returned when the pipeline raises; same body API Gateway uses."""
    return GatewayResponse(
        status_code=500,
        headers=json_headers(),
        body=json.dumps({"message": "Internal server error"}),
    )
