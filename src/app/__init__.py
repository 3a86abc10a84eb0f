"""App: orquestração, contratos e infraestrutura do callback.

Subpastas:
- bootstrap/: composition root (logging, settings, codec singleton)
- coordinators/: fluxo mensagem em claro -> handler -> resposta
- services/: handlers de mensagem
- infra/crypto/: codec do envelope (AES-CBC, padding, assinatura, XML)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs

Padrão: app executa; api adapta; config configura.
"""
