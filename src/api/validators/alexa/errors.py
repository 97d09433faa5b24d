"""Erros de validação de diretivas Alexa."""

from __future__ import annotations

from utils.errors import DirectiveError


class MalformedRequestError(DirectiveError):
    """Diretiva, header ou escopo ausente/mal-formado."""

    kind = "malformed_request"
    error_type = "INVALID_DIRECTIVE"


class UnsupportedVersionError(DirectiveError):
    """payloadVersion diferente de "3"."""

    kind = "unsupported_version"
    error_type = "INVALID_DIRECTIVE"


class UnsupportedAuthTypeError(DirectiveError):
    """Escopo com tipo diferente de BearerToken."""

    kind = "unsupported_auth_type"
    error_type = "INVALID_AUTHORIZATION_CREDENTIAL"
