"""Classificação de erros do backend Home Assistant."""

from __future__ import annotations

from utils.errors import DirectiveError, InternalError

# Status que indicam token recusado pelo backend
CREDENTIAL_ERROR_STATUS_CODES = frozenset({401, 403})


class InvalidAuthorizationCredentialError(DirectiveError):
    """Backend recusou o token bearer (401/403)."""

    kind = "invalid_authorization_credential"
    error_type = "INVALID_AUTHORIZATION_CREDENTIAL"


def is_error_status(status_code: int) -> bool:
    """Status >= 400 é falha do backend."""
    return status_code >= 400


def classify_backend_status(status_code: int) -> DirectiveError:
    """Mapeia status de erro do backend para a exceção correspondente.

    401/403 → InvalidAuthorizationCredentialError; demais → InternalError.
    """
    message = f"status code: {status_code}"
    if status_code in CREDENTIAL_ERROR_STATUS_CODES:
        return InvalidAuthorizationCredentialError(message, status_code=status_code)
    return InternalError(message, status_code=status_code)
