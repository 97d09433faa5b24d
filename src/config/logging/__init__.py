"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # No bootstrap (uma vez por processo)
    configure_logging(level="INFO", service_name="alexa-ha-relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("home_assistant_response", extra={"status_code": 200})

Campos obrigatórios em todo log:
- correlation_id (messageId da diretiva ou request id do runtime)
- service
- level
- logger
- message
- asctime

Tokens bearer nunca entram nos logs.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
