"""
Request models for the gateway app.

A GatewayRequest is the read-only view of one API Gateway proxy event.
Both payload shapes are accepted: REST API (v1) and HTTP API (v2).
"""

from types import MappingProxyType
from typing import Optional, Any, Mapping
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RequestIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_ip: Optional[str] = None
    user_agent: Optional[str] = None


class GatewayRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    http_method: str = ""
    path: str = ""
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    query_string_parameters: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    body: Optional[str] = None
    is_base64_encoded: bool = False
    identity: RequestIdentity = Field(default_factory=RequestIdentity)
    request_id: Optional[str] = None

    @field_validator("headers", "query_string_parameters", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @property
    def source_ip(self) -> Optional[str]:
        return self.identity.source_ip

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    @classmethod
    def from_event(cls, event: Optional[Mapping[str, Any]]) -> "GatewayRequest":
        """
        Build a request from a raw proxy event.

        Never raises on a missing or malformed requestContext; fields of the
        wrong type are dropped and the request simply carries no value for them.
        """
        event = _as_mapping(event)
        request_context = _as_mapping(event.get("requestContext"))

        if event.get("version") == "2.0":
            http = _as_mapping(request_context.get("http"))
            method = _as_str(http.get("method"))
            path = _as_str(http.get("path")) or _as_str(event.get("rawPath"))
            source_ip = _as_str(http.get("sourceIp"))
            user_agent = _as_str(http.get("userAgent"))
        else:
            identity = _as_mapping(request_context.get("identity"))
            method = _as_str(event.get("httpMethod"))
            path = _as_str(event.get("path"))
            source_ip = _as_str(identity.get("sourceIp"))
            user_agent = _as_str(identity.get("userAgent"))

        return cls(
            http_method=method or "",
            path=path or "",
            headers=_string_map(event.get("headers")),
            query_string_parameters=_string_map(event.get("queryStringParameters")),
            body=_as_str(event.get("body")),
            is_base64_encoded=bool(event.get("isBase64Encoded", False)),
            identity=RequestIdentity(source_ip=source_ip or None, user_agent=user_agent),
            request_id=_as_str(request_context.get("requestId")),
        )


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _string_map(value: Any) -> dict:
    # API Gateway sends null instead of {} when there is nothing to send
    return {str(k): str(v) for k, v in _as_mapping(value).items() if v is not None}
