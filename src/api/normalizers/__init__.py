"""Normalizers por canal: extração estrutural de payloads externos.

Estrutura:
- alexa/: envelope de diretivas Alexa Smart Home (payload v3)
"""

from .alexa import extract_directive, extract_header, extract_scope

__all__ = [
    "extract_directive",
    "extract_header",
    "extract_scope",
]
