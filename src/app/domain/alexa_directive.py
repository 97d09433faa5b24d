"""Modelos de domínio da diretiva Alexa Smart Home (payload v3).

São visões tipadas e somente-leitura de partes do envelope. O envelope
original continua sendo encaminhado ao backend sem reconstrução.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SUPPORTED_PAYLOAD_VERSION = "3"
BEARER_TOKEN_TYPE = "BearerToken"


def _as_str(value: Any) -> str:
    """Valores não-string (ausentes, null, números) viram string vazia."""
    return value if isinstance(value, str) else ""


class DirectiveHeader(BaseModel):
    """Header da diretiva (namespace, name, payloadVersion, messageId)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    namespace: str = Field(default="", description="Namespace da interface Alexa.")
    name: str = Field(default="", description="Nome da diretiva.")
    payload_version: str = Field(
        default="",
        alias="payloadVersion",
        description="Versão do payload; apenas '3' é suportada.",
    )
    message_id: str = Field(
        default="",
        alias="messageId",
        description="Identificador único da mensagem.",
    )

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> DirectiveHeader:
        """Constrói o header a partir do dict bruto, sem coerção de tipos."""
        return cls(
            namespace=_as_str(raw.get("namespace")),
            name=_as_str(raw.get("name")),
            payload_version=_as_str(raw.get("payloadVersion")),
            message_id=_as_str(raw.get("messageId")),
        )


class Scope(BaseModel):
    """Escopo de autorização (credencial) carregado pela diretiva."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(default="", description="Tipo de credencial.")
    token: str = Field(default="", repr=False, description="Token bearer.")

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> Scope:
        """Constrói o escopo a partir do dict bruto, sem coerção de tipos."""
        return cls(type=_as_str(raw.get("type")), token=_as_str(raw.get("token")))

    @property
    def is_bearer_token(self) -> bool:
        """Retorna True se o escopo é do tipo BearerToken."""
        return self.type == BEARER_TOKEN_TYPE
