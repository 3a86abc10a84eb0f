"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.echo_reply import EchoMessageHandler

__all__ = [
    "EchoMessageHandler",
]
