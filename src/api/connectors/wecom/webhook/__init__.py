"""Webhook WeCom: handshake, abertura do envelope e resposta."""

from .receive import (
    CallbackRequestError,
    InvalidEnvelopeError,
    InvalidSignatureError,
    pack_callback_reply,
    parse_callback_request,
)
from .verify import verify_callback_challenge

__all__ = [
    "CallbackRequestError",
    "InvalidEnvelopeError",
    "InvalidSignatureError",
    "pack_callback_reply",
    "parse_callback_request",
    "verify_callback_challenge",
]
