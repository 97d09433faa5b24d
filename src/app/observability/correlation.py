"""Gerenciamento de correlation_id para rastreamento de invocações.

O correlation_id de uma invocação é o messageId da diretiva Alexa;
sem ele, usa o request id do runtime ou um UUID novo.
Usa ContextVar para ser thread/async-safe.

Uso:
    token = set_correlation_id(resolve_correlation_id(event, context))
    try:
        # processar diretiva
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import Any

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or str(uuid.uuid4())
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def resolve_correlation_id(event: Any, context: Any = None) -> str | None:
    """Escolhe o correlation_id de uma invocação.

    Ordem: directive.header.messageId, context.aws_request_id.

    Returns:
        ID encontrado ou None (set_correlation_id gera um UUID).
    """
    if isinstance(event, dict):
        directive = event.get("directive")
        header = directive.get("header") if isinstance(directive, dict) else None
        message_id = header.get("messageId") if isinstance(header, dict) else None
        if isinstance(message_id, str) and message_id:
            return message_id

    request_id = getattr(context, "aws_request_id", None)
    if isinstance(request_id, str) and request_id:
        return request_id
    return None
