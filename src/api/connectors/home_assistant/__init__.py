"""Connector do backend Home Assistant (endpoint Smart Home)."""

from api.connectors.home_assistant.errors import (
    CREDENTIAL_ERROR_STATUS_CODES,
    InvalidAuthorizationCredentialError,
    classify_backend_status,
)
from api.connectors.home_assistant.http_client import (
    HomeAssistantHttpClient,
    build_headers,
    serialize_event,
)

__all__ = [
    "CREDENTIAL_ERROR_STATUS_CODES",
    "HomeAssistantHttpClient",
    "InvalidAuthorizationCredentialError",
    "build_headers",
    "classify_backend_status",
    "serialize_event",
]
