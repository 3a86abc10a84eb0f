"""Abertura do envelope inbound e empacotamento da resposta (sem PII)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.infra.crypto import SignatureInvalidError, WecomCryptoError

if TYPE_CHECKING:
    from api.connectors.wecom.query import CallbackQuery
    from app.infra.crypto import InboundMessage, MessageReply
    from app.protocols import EnvelopeCodecProtocol


class CallbackRequestError(ValueError):
    """Erro base para falhas do callback."""


class InvalidSignatureError(CallbackRequestError):
    """msg_signature não confere."""


class InvalidEnvelopeError(CallbackRequestError):
    """Envelope ilegível: base64, padding, frame ou XML inválidos."""


def translate_codec_error(exc: WecomCryptoError) -> CallbackRequestError:
    """Converte erro do codec no erro de borda correspondente."""
    if isinstance(exc, SignatureInvalidError):
        return InvalidSignatureError(exc.reason)
    return InvalidEnvelopeError(exc.reason)


def parse_callback_request(
    codec: EnvelopeCodecProtocol,
    query: CallbackQuery,
    raw_body: bytes,
) -> InboundMessage:
    """Valida assinatura, descriptografa e parseia a mensagem.

    Raises:
        InvalidSignatureError: Se a assinatura for inválida
        InvalidEnvelopeError: Se o envelope ou a mensagem forem ilegíveis
    """
    try:
        return codec.unpack_message(query.msg_signature, query.timestamp, query.nonce, raw_body)
    except WecomCryptoError as exc:
        raise translate_codec_error(exc) from exc


def pack_callback_reply(
    codec: EnvelopeCodecProtocol,
    query: CallbackQuery,
    reply: MessageReply,
) -> bytes:
    """Criptografa e assina a resposta, ecoando timestamp e nonce do request.

    Raises:
        InvalidEnvelopeError: Se a resposta não puder ser serializada
    """
    try:
        _envelope, body = codec.pack_reply(reply, query.timestamp, query.nonce)
    except WecomCryptoError as exc:
        raise translate_codec_error(exc) from exc
    return body
