"""Protocolo do codec de envelope usado pela borda HTTP.

Rotas dependem desta abstração, não de app.infra.crypto diretamente, o
que permite injetar fakes nos testes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.infra.crypto import EncryptedEnvelope, InboundMessage, MessageReply


class EnvelopeCodecProtocol(Protocol):
    """Interface mínima do codec para o callback."""

    def verify_url(self, signature: str, timestamp: str, nonce: str, echostr: str) -> str:
        ...

    def unpack_message(
        self,
        signature: str,
        timestamp: str,
        nonce: str,
        body: bytes | str,
    ) -> InboundMessage:
        ...

    def pack_reply(
        self,
        reply: MessageReply,
        timestamp: str,
        nonce: str,
    ) -> tuple[EncryptedEnvelope, bytes]:
        ...
