"""Protocolos e contratos do core da aplicação."""

from .crypto import EnvelopeCodecProtocol
from .message_handler import MessageHandlerProtocol

__all__ = [
    "EnvelopeCodecProtocol",
    "MessageHandlerProtocol",
]
