"""Exceções base compartilhadas entre as camadas."""

from __future__ import annotations

from typing import Any, ClassVar


class ConfigurationError(RuntimeError):
    """Configuração inválida detectada no startup (fatal)."""


class DirectiveError(Exception):
    """Base para falhas no processamento de uma diretiva Alexa.

    Cada subclasse define `kind` (classificação interna, usada em logs)
    e `error_type` (tipo de erro do ErrorResponse da Alexa).

    Args:
        message: Mensagem sem dados sensíveis.
        status_code: Status HTTP do backend, quando a falha veio dele.
    """

    kind: ClassVar[str] = "internal_error"
    error_type: ClassVar[str] = "INTERNAL_ERROR"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_error_response(self, event: dict[str, Any] | None = None) -> dict[str, Any]:
        """Monta um ErrorResponse da Alexa para a diretiva recebida.

        Campos ausentes ou com tipo inesperado no evento são ignorados.
        """
        directive = (event or {}).get("directive")
        if not isinstance(directive, dict):
            directive = {}
        header = directive.get("header")
        if not isinstance(header, dict):
            header = {}

        response_header: dict[str, Any] = {
            "namespace": "Alexa",
            "name": "ErrorResponse",
            "payloadVersion": "3",
            "messageId": f"{header.get('messageId') or 'error'}-R",
        }
        if header.get("correlationToken"):
            response_header["correlationToken"] = header["correlationToken"]

        response_event: dict[str, Any] = {
            "header": response_header,
            "payload": {"type": self.error_type, "message": self.message},
        }
        endpoint = directive.get("endpoint")
        if isinstance(endpoint, dict) and endpoint.get("endpointId"):
            response_event["endpoint"] = {"endpointId": endpoint["endpointId"]}
        return {"event": response_event}


class InternalError(DirectiveError):
    """Falha interna: serialização, transporte ou status inesperado do backend."""


class ResponseDecodeError(DirectiveError):
    """Corpo da resposta do backend não é um documento JSON."""

    kind = "response_decode_error"
