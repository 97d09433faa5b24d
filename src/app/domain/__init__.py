"""Modelos de domínio."""

from .alexa_directive import (
    BEARER_TOKEN_TYPE,
    SUPPORTED_PAYLOAD_VERSION,
    DirectiveHeader,
    Scope,
)

__all__ = [
    "BEARER_TOKEN_TYPE",
    "SUPPORTED_PAYLOAD_VERSION",
    "DirectiveHeader",
    "Scope",
]
