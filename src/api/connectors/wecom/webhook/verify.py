"""Handshake de verificação de URL exigido pela plataforma.

O `echostr` é um envelope degenerado: ciphertext assinado cujo plaintext
deve ser devolvido literalmente no corpo da resposta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.infra.crypto import WecomCryptoError

from .receive import InvalidEnvelopeError, translate_codec_error

if TYPE_CHECKING:
    from api.connectors.wecom.query import CallbackQuery
    from app.protocols import EnvelopeCodecProtocol


def verify_callback_challenge(
    codec: EnvelopeCodecProtocol,
    query: CallbackQuery,
    echostr: str | None,
) -> str:
    """Valida o desafio e retorna o conteúdo a ser respondido.

    Raises:
        InvalidEnvelopeError: Se echostr estiver ausente ou ilegível
        InvalidSignatureError: Se a assinatura for inválida

    Returns:
        echostr em claro
    """
    if not echostr:
        raise InvalidEnvelopeError("missing_echostr")
    try:
        return codec.verify_url(query.msg_signature, query.timestamp, query.nonce, echostr)
    except WecomCryptoError as exc:
        raise translate_codec_error(exc) from exc

