"""API: camada de borda entre a Alexa e o Home Assistant.

Responsabilidades:
- Extrair header e escopo do envelope da diretiva
- Validar versão do payload e tipo de autenticação
- Encaminhar o envelope ao endpoint Smart Home do backend

Subpastas:
- connectors/: adapter HTTP do endpoint Smart Home
- normalizers/: extração estrutural do envelope Alexa
- validators/: validação do envelope e erros de rejeição

NÃO PODE conter: wiring, seleção de transporte, entry point do runtime.
"""
