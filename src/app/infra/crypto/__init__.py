"""Codec criptográfico do callback WeCom.

Implementa o envelope seguro trocado com a plataforma: derivação de chave,
AES-256-CBC com IV fixo, padding de bloco 32, framing com prefixo de
tamanho e assinatura SHA-1 ordenada.

Localizado em app/infra/ para manter boundaries corretas:
- api/ usa o codec via app.bootstrap.get_envelope_codec()
- O codec não faz IO nem loga conteúdo/segredos
"""

from .constants import AES_KEY_SIZE, IV_SIZE, PADDING_BLOCK_SIZE
from .envelope import EnvelopeCodec
from .errors import (
    InvalidKeyError,
    InvalidPaddingError,
    MalformedCiphertextError,
    MalformedFrameError,
    ReceiveIdMismatchError,
    SignatureInvalidError,
    WecomCryptoError,
    XmlParseError,
)
from .framing import PlainFrame
from .keys import KeyContext
from .messages import (
    EncryptedEnvelope,
    InboundEnvelope,
    InboundMessage,
    MessageReply,
    MessageSender,
)
from .signature import SignatureVerifier, compute_signature, verify_signature

__all__ = [
    "AES_KEY_SIZE",
    "IV_SIZE",
    "PADDING_BLOCK_SIZE",
    "EncryptedEnvelope",
    "EnvelopeCodec",
    "InboundEnvelope",
    "InboundMessage",
    "InvalidKeyError",
    "InvalidPaddingError",
    "KeyContext",
    "MalformedCiphertextError",
    "MalformedFrameError",
    "MessageReply",
    "MessageSender",
    "PlainFrame",
    "ReceiveIdMismatchError",
    "SignatureInvalidError",
    "SignatureVerifier",
    "WecomCryptoError",
    "XmlParseError",
    "compute_signature",
    "verify_signature",
]
