"""Connectors: adapters de borda para APIs externas.

Estrutura:
- home_assistant/: endpoint Smart Home da integração Alexa do Home Assistant
"""

__all__: list[str] = []
