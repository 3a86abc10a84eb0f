"""Processamento inbound: entrega a mensagem ao handler e obtém a resposta.

Falha do handler não vira erro HTTP: a plataforma recebe uma resposta de
texto de fallback, como o bot sempre fez.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.crypto import MessageReply

if TYPE_CHECKING:
    from app.infra.crypto import InboundMessage
    from app.protocols import MessageHandlerProtocol

logger = logging.getLogger(__name__)


async def process_inbound_message(
    message: InboundMessage,
    handler: MessageHandlerProtocol,
    fallback_reply: str,
) -> MessageReply:
    """Executa o handler; em exceção devolve resposta de fallback.

    Sem logs de conteúdo: só tipo e id da mensagem.
    """
    try:
        reply = await handler.handle(message)
    except Exception as exc:
        logger.warning(
            "inbound_handler_failed",
            extra={
                "channel": "wecom",
                "msg_type": message.msg_type,
                "msg_id": message.msg_id,
                "error_type": type(exc).__name__,
            },
        )
        return MessageReply(content=fallback_reply)

    logger.info(
        "inbound_processed",
        extra={
            "channel": "wecom",
            "msg_type": message.msg_type,
            "msg_id": message.msg_id,
            "reply_type": reply.msg_type,
        },
    )
    return reply
