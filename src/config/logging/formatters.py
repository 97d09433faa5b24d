"""Formatters de logging estruturado (JSON via python-json-logger)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Nomes curtos usados pelos painéis de log
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Valores não serializáveis em `extra` são convertidos com `str`.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "WARNING",
            "logger": "app.use_cases.alexa.dispatch_directive",
            "message": "home_assistant_error_status",
            "correlation_id": "8d1f...",
            "service": "alexa-ha-relay",
            "status_code": 403
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        json_default=str,
    )
