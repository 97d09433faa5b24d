"""Cliente HTTP do endpoint Smart Home do Home Assistant.

Encaminha o envelope da diretiva sem alterações e devolve a resposta
do backend como documento JSON:
- Uma tentativa por invocação (sem retry, sem backoff)
- Falha de transporte (conexão, DNS, TLS, timeout) → InternalError
- Status 401/403 → InvalidAuthorizationCredentialError
- Demais status >= 400 → InternalError
- Corpo não-JSON ou não-objeto → ResponseDecodeError
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.home_assistant.errors import classify_backend_status, is_error_status
from api.connectors.home_assistant.ha_logging import (
    log_error_status,
    log_failure,
    log_success,
)
from utils.errors import InternalError, ResponseDecodeError

if TYPE_CHECKING:
    from app.protocols import TransportProviderProtocol

logger: logging.Logger = logging.getLogger(__name__)


def serialize_event(event: Any) -> bytes:
    """Serializa o evento original completo para o corpo da requisição.

    Raises:
        InternalError: Se o evento não for serializável em JSON.
    """
    try:
        return json.dumps(event).encode("utf-8")
    except (TypeError, ValueError) as exc:
        logger.error(
            "alexa_event_serialization_failed",
            extra={"error_type": type(exc).__name__},
        )
        raise InternalError("failed to serialize event") from exc


def build_headers(access_token: str) -> dict[str, str]:
    """Headers da chamada; token vazio é enviado como está."""
    return {
        "Authorization": f"Bearer {access_token}",
        "Content-Type": "application/json",
    }


class HomeAssistantHttpClient:
    """Encaminha diretivas ao endpoint /api/alexa/smart_home.

    Args:
        transport: Provedor de clientes httpx (direto ou overlay)
        endpoint: URL completa do endpoint Smart Home
    """

    def __init__(self, transport: TransportProviderProtocol, endpoint: str) -> None:
        self._transport = transport
        self.endpoint = endpoint

    async def forward_directive(
        self,
        event: dict[str, Any],
        access_token: str,
    ) -> dict[str, Any]:
        """Envia o evento ao backend e retorna a resposta decodificada.

        Raises:
            InternalError: serialização, transporte ou status >= 400 (exceto 401/403)
            InvalidAuthorizationCredentialError: status 401/403
            ResponseDecodeError: corpo inválido
        """
        body = serialize_event(event)
        response = await self._execute_post(body, build_headers(access_token))
        return self._process_response(response)

    async def _execute_post(self, body: bytes, headers: dict[str, str]) -> httpx.Response:
        """POST único; o cliente é fechado ao final de cada chamada."""
        try:
            async with self._transport.client() as client:
                return await client.post(self.endpoint, content=body, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log_failure("home_assistant_request_failed", self.endpoint, exc)
            raise InternalError("internal server error") from exc

    def _process_response(self, response: httpx.Response) -> dict[str, Any]:
        """Valida status e decodifica o corpo."""
        if is_error_status(response.status_code):
            error = classify_backend_status(response.status_code)
            log_error_status(self.endpoint, response.status_code, error.kind)
            raise error

        try:
            data = response.json()
        except ValueError as exc:
            log_failure("home_assistant_response_decode_failed", self.endpoint, exc)
            raise ResponseDecodeError("error decoding response") from exc

        if not isinstance(data, dict):
            logger.error(
                "home_assistant_response_not_object",
                extra={"endpoint": self.endpoint, "body_type": type(data).__name__},
            )
            raise ResponseDecodeError("error decoding response")

        log_success(self.endpoint, response.status_code, data)
        return data
