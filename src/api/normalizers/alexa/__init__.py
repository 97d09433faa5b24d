"""Normalizer de diretivas Alexa Smart Home (payload v3)."""

from .extractor import (
    SCOPE_EXTRACTORS,
    extract_directive,
    extract_header,
    extract_scope,
    scope_from_endpoint,
    scope_from_grantee,
    scope_from_payload,
)
from .sanitizer import mask_credentials

__all__ = [
    "SCOPE_EXTRACTORS",
    "extract_directive",
    "extract_header",
    "extract_scope",
    "mask_credentials",
    "scope_from_endpoint",
    "scope_from_grantee",
    "scope_from_payload",
]
