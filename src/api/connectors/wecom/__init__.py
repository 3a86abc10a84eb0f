"""Conector WeCom - adapter de borda do callback criptografado.

Responsabilidades:
- Leitura dos query params do callback (msg_signature, timestamp, nonce)
- Handshake de verificação de URL (echostr)
- Abertura do envelope inbound e empacotamento da resposta
"""

from .query import CallbackQuery, MissingQueryParamError
from .webhook import (
    CallbackRequestError,
    InvalidEnvelopeError,
    InvalidSignatureError,
    pack_callback_reply,
    parse_callback_request,
    verify_callback_challenge,
)

__all__ = [
    "CallbackQuery",
    "CallbackRequestError",
    "InvalidEnvelopeError",
    "InvalidSignatureError",
    "MissingQueryParamError",
    "pack_callback_reply",
    "parse_callback_request",
    "verify_callback_challenge",
]
