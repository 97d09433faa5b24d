"""Helpers de logging para chamadas ao Home Assistant (sem tokens)."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def log_error_status(endpoint: str, status_code: int, error_kind: str) -> None:
    """Loga status de erro do backend (credencial recusada ou falha)."""
    logger.warning(
        "home_assistant_error_status",
        extra={
            "endpoint": endpoint,
            "status_code": status_code,
            "error_kind": error_kind,
        },
    )


def log_failure(event: str, endpoint: str, exc: BaseException) -> None:
    """Loga falha de transporte, serialização ou decodificação."""
    logger.error(
        event,
        extra={"endpoint": endpoint, "error_type": type(exc).__name__},
    )


def log_success(endpoint: str, status_code: int, body: dict[str, Any]) -> None:
    """Loga resposta aceita; o corpo completo só em DEBUG."""
    logger.info(
        "home_assistant_response",
        extra={"endpoint": endpoint, "status_code": status_code},
    )
    logger.debug("home_assistant_response_body", extra={"response": body})
