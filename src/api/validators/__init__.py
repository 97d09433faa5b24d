"""Validators por canal: validação de payloads recebidos.

Estrutura:
- alexa/: diretivas Alexa Smart Home (payloadVersion, escopo BearerToken)
"""

__all__: list[str] = []
