"""
Terminal handler: the app's actual response.

Ignores the request entirely and always answers with the same JSON body.
"""

from models.request_models import GatewayRequest
from models.response_models import GatewayResponse, json_headers

APP_BODY = "i'm an app"


def handle(request: GatewayRequest) -> GatewayResponse:
    return GatewayResponse(status_code=200, headers=json_headers(), body=APP_BODY)
