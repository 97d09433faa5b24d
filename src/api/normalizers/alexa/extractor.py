"""Extrator estrutural do envelope de diretivas Alexa Smart Home.

Responsabilidades:
- Localizar a diretiva e o header no evento bruto
- Localizar o escopo de autorização nas posições conhecidas

Não faz validação de negócio - apenas extração estrutural.
Funções retornam None quando a estrutura não existe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


def _child(parent: Any, key: str) -> dict[str, Any] | None:
    """Retorna parent[key] se ambos forem dicts."""
    if not isinstance(parent, dict):
        return None
    value = parent.get(key)
    return value if isinstance(value, dict) else None


def extract_directive(event: Any) -> dict[str, Any] | None:
    """Extrai `event.directive`."""
    return _child(event, "directive")


def extract_header(directive: Mapping[str, Any]) -> dict[str, Any] | None:
    """Extrai `directive.header`."""
    return _child(directive, "header")


def scope_from_endpoint(directive: Mapping[str, Any]) -> dict[str, Any] | None:
    """Escopo da maioria das diretivas de controle e ReportState."""
    return _child(_child(directive, "endpoint"), "scope")


def scope_from_grantee(directive: Mapping[str, Any]) -> dict[str, Any] | None:
    """Escopo da diretiva AcceptGrant (vinculação de conta)."""
    return _child(_child(directive, "payload"), "grantee")


def scope_from_payload(directive: Mapping[str, Any]) -> dict[str, Any] | None:
    """Escopo da diretiva Discover."""
    return _child(_child(directive, "payload"), "scope")


# Ordem de prioridade: o primeiro extrator com resultado vence
SCOPE_EXTRACTORS: tuple[Callable[[Mapping[str, Any]], dict[str, Any] | None], ...] = (
    scope_from_endpoint,
    scope_from_grantee,
    scope_from_payload,
)


def extract_scope(directive: Mapping[str, Any]) -> dict[str, Any] | None:
    """Aplica SCOPE_EXTRACTORS em ordem e retorna o primeiro escopo encontrado."""
    for extractor in SCOPE_EXTRACTORS:
        scope = extractor(directive)
        if scope is not None:
            return scope
    return None
