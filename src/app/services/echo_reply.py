"""Handler padrão: responde com o próprio texto recebido."""

from __future__ import annotations

from app.infra.crypto import InboundMessage, MessageReply


class EchoMessageHandler:
    """Implementa MessageHandlerProtocol ecoando o conteúdo de texto."""

    async def handle(self, message: InboundMessage) -> MessageReply:
        return MessageReply(content=message.content)
