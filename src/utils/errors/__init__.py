"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    DirectiveError,
    InternalError,
    ResponseDecodeError,
)

__all__ = [
    "ConfigurationError",
    "DirectiveError",
    "InternalError",
    "ResponseDecodeError",
]
