"""App: orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (settings, logging, wiring)
- use_cases/: despacho de diretivas Alexa
- domain/: modelos do envelope (header, escopo)
- infra/: transporte HTTP direto e sessão overlay Tailscale
- protocols/: contratos entre camadas
- observability/: correlation_id dos logs estruturados

Entry point do runtime: app.lambda_handler.handler
"""
