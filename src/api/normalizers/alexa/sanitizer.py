"""Mascaramento de credenciais em eventos Alexa antes de logar."""

from __future__ import annotations

from typing import Any

# Chaves cujo valor é credencial (scope.token, grantee.token, grant.code)
SENSITIVE_KEYS = frozenset({"token", "code"})
MASK = "***"


def mask_credentials(value: Any) -> Any:
    """Retorna cópia do valor com credenciais mascaradas.

    O objeto original não é alterado: ele é o que segue para o backend.
    """
    if isinstance(value, dict):
        return {
            key: MASK if key in SENSITIVE_KEYS and item else mask_credentials(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [mask_credentials(item) for item in value]
    return value
