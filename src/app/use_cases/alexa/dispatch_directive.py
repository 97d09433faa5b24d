"""Use case de despacho de diretivas Alexa para o Home Assistant.

Fluxo: validar envelope → resolver credencial → encaminhar ao backend.
Toda falha é lançada imediatamente como DirectiveError; não há retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.alexa import mask_credentials
from api.validators.alexa import validate_directive
from config.logging import log_fallback
from utils.errors import DirectiveError

if TYPE_CHECKING:
    from app.domain import Scope
    from app.protocols import HomeAssistantClientProtocol

logger = logging.getLogger(__name__)


class DirectiveDispatcher:
    """Encaminha diretivas Alexa validadas ao backend.

    Args:
        backend: Cliente do endpoint Smart Home
        debug: Habilita o token de fallback para escopos sem token
        fallback_token: Long-lived access token usado em modo debug
    """

    def __init__(
        self,
        backend: HomeAssistantClientProtocol,
        debug: bool = False,
        fallback_token: str = "",
    ) -> None:
        self._backend = backend
        self._debug = debug
        self._fallback_token = fallback_token

    async def handle(self, event: dict[str, Any]) -> dict[str, Any]:
        """Processa um evento e retorna a resposta do backend sem alterações.

        Raises:
            DirectiveError: Em qualquer falha de validação, transporte ou backend.
        """
        logger.debug("alexa_event", extra={"event": mask_credentials(event)})

        try:
            validated = validate_directive(event)
        except DirectiveError as exc:
            logger.warning("alexa_directive_rejected", extra={"error_kind": exc.kind})
            raise

        logger.info(
            "alexa_directive_received",
            extra={
                "namespace": validated.header.namespace,
                "directive_name": validated.header.name,
                "message_id": validated.header.message_id,
            },
        )

        access_token = self.resolve_access_token(validated.scope)
        # Envelope original, não reconstruído a partir dos modelos
        return await self._backend.forward_directive(event, access_token)

    def resolve_access_token(self, scope: Scope) -> str:
        """Token do escopo; vazio usa o fallback apenas em modo debug."""
        if scope.token:
            return scope.token
        if self._debug:
            log_fallback(logger, "bearer_token", reason="empty_scope_token")
            return self._fallback_token
        return scope.token
