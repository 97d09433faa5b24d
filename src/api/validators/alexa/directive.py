"""Validação do envelope de diretivas Alexa Smart Home.

Ordem das checagens (a primeira falha interrompe):
1. `directive` presente e objeto
2. `header.payloadVersion == "3"` (header ausente também é rejeitado)
3. escopo presente em endpoint.scope, payload.grantee ou payload.scope
4. `scope.type == "BearerToken"`
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from api.normalizers.alexa import extract_directive, extract_header, extract_scope
from api.validators.alexa.errors import (
    MalformedRequestError,
    UnsupportedAuthTypeError,
    UnsupportedVersionError,
)
from app.domain import SUPPORTED_PAYLOAD_VERSION, DirectiveHeader, Scope


@dataclass(frozen=True, slots=True)
class ValidatedDirective:
    """Resultado da validação: visões tipadas do envelope aceito."""

    header: DirectiveHeader
    scope: Scope


def validate_payload_version(directive: dict[str, Any]) -> DirectiveHeader:
    """Exige header com payloadVersion "3" (igualdade de string, sem negociação)."""
    raw_header = extract_header(directive)
    if raw_header is None or raw_header.get("payloadVersion") != SUPPORTED_PAYLOAD_VERSION:
        raise UnsupportedVersionError("only support payloadVersion == 3")
    return DirectiveHeader.from_raw(raw_header)


def validate_scope(directive: dict[str, Any]) -> Scope:
    """Resolve o escopo e exige tipo BearerToken."""
    raw_scope = extract_scope(directive)
    if raw_scope is None:
        raise MalformedRequestError("malformatted request - missing endpoint.scope")

    scope = Scope.from_raw(raw_scope)
    if not scope.is_bearer_token:
        raise UnsupportedAuthTypeError("only support BearerToken")
    return scope


def validate_directive(event: Any) -> ValidatedDirective:
    """Valida o evento completo.

    Raises:
        MalformedRequestError: directive ou escopo ausente
        UnsupportedVersionError: payloadVersion diferente de "3"
        UnsupportedAuthTypeError: escopo não é BearerToken
    """
    directive = extract_directive(event)
    if directive is None:
        raise MalformedRequestError("malformatted request - missing directive")

    header = validate_payload_version(directive)
    scope = validate_scope(directive)
    return ValidatedDirective(header=header, scope=scope)
