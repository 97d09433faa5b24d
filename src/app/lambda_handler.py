"""Entry point da função serverless (AWS Lambda).

Handler configurado no runtime: `app.lambda_handler.handler`.

Cada invocação:
1. Obtém o dispatcher (montado uma vez por processo)
2. Define o correlation_id (messageId da diretiva ou request id)
3. Executa o despacho limitado pelo tempo restante da invocação
4. Retorna a resposta do backend, ou propaga o erro ao runtime
   (com ERROR_RESPONSE_DOCUMENTS=true, retorna um ErrorResponse da Alexa)
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.bootstrap import get_dispatcher
from app.observability import (
    reset_correlation_id,
    resolve_correlation_id,
    set_correlation_id,
)
from config.settings import get_base_settings
from utils.errors import DirectiveError, InternalError

if TYPE_CHECKING:
    from app.use_cases.alexa import DirectiveDispatcher

logger = logging.getLogger(__name__)

# Folga para devolver a falha antes do runtime encerrar a invocação
DEADLINE_MARGIN_SECONDS = 0.5


def remaining_seconds(context: Any) -> float | None:
    """Tempo disponível para o despacho, ou None sem contexto do runtime."""
    get_remaining = getattr(context, "get_remaining_time_in_millis", None)
    if not callable(get_remaining):
        return None
    return max(get_remaining() / 1000 - DEADLINE_MARGIN_SECONDS, 0.0)


async def dispatch(
    dispatcher: DirectiveDispatcher,
    event: dict[str, Any],
    timeout_seconds: float | None = None,
) -> dict[str, Any]:
    """Executa o despacho; ao estourar o prazo, a requisição é cancelada.

    Raises:
        InternalError: Se o prazo da invocação expirar.
    """
    if timeout_seconds is None:
        return await dispatcher.handle(event)

    try:
        return await asyncio.wait_for(dispatcher.handle(event), timeout=timeout_seconds)
    except asyncio.TimeoutError as exc:
        logger.error(
            "invocation_deadline_exceeded",
            extra={"timeout_seconds": timeout_seconds},
        )
        raise InternalError("invocation deadline exceeded") from exc


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Handler da invocação.

    Raises:
        ConfigurationError: Configuração inválida (nenhuma invocação é atendida).
        DirectiveError: Falha no despacho, quando ERROR_RESPONSE_DOCUMENTS está desligado.
    """
    dispatcher = get_dispatcher()
    settings = get_base_settings()

    token = set_correlation_id(resolve_correlation_id(event, context))
    try:
        return asyncio.run(dispatch(dispatcher, event, remaining_seconds(context)))
    except DirectiveError as exc:
        if not settings.error_response_documents:
            raise
        logger.info(
            "alexa_error_response",
            extra={"error_kind": exc.kind, "error_type": exc.error_type},
        )
        return exc.to_error_response(event)
    finally:
        reset_correlation_id(token)
