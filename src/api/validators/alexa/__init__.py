"""Validadores de diretivas Alexa Smart Home.

Uso:
    from api.validators.alexa import validate_directive

    validated = validate_directive(event)
    validated.scope.token
"""

from api.validators.alexa.directive import (
    ValidatedDirective,
    validate_directive,
    validate_payload_version,
    validate_scope,
)
from api.validators.alexa.errors import (
    MalformedRequestError,
    UnsupportedAuthTypeError,
    UnsupportedVersionError,
)

__all__ = [
    "MalformedRequestError",
    "UnsupportedAuthTypeError",
    "UnsupportedVersionError",
    "ValidatedDirective",
    "validate_directive",
    "validate_payload_version",
    "validate_scope",
]
