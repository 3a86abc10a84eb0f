"""Protocolo da camada de negócio que responde mensagens do callback."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.infra.crypto import InboundMessage, MessageReply


class MessageHandlerProtocol(Protocol):
    """Contrato mínimo: recebe a mensagem em claro e devolve a resposta."""

    async def handle(self, message: InboundMessage) -> MessageReply: ...
