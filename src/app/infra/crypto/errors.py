"""Erros tipados do codec de mensagens WeCom.

Cada erro carrega um `reason` curto (sem segredo nem conteúdo de mensagem)
para que a camada HTTP possa logar e mapear status sem vazar dados.
"""

from __future__ import annotations


class WecomCryptoError(Exception):
    """Erro em operação criptográfica do callback."""

    default_reason = "crypto_error"

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason or self.default_reason
        super().__init__(self.reason)


class InvalidKeyError(WecomCryptoError):
    """EncodingAESKey não decodifica ou não tem 32 bytes."""

    default_reason = "invalid_key"


class SignatureInvalidError(WecomCryptoError):
    """Assinatura recalculada não confere com a recebida."""

    default_reason = "invalid_signature"


class MalformedCiphertextError(WecomCryptoError):
    """Ciphertext ausente, não-base64, vazio ou fora do tamanho de bloco."""

    default_reason = "malformed_ciphertext"


class InvalidPaddingError(WecomCryptoError):
    """Padding inválido após a descriptografia."""

    default_reason = "invalid_padding"


class MalformedFrameError(WecomCryptoError):
    """Frame de plaintext truncado ou com tamanho declarado inconsistente."""

    default_reason = "malformed_frame"


class ReceiveIdMismatchError(WecomCryptoError):
    """Receive id do frame difere do configurado."""

    default_reason = "receive_id_mismatch"


class XmlParseError(WecomCryptoError):
    """Documento XML malformado ou fora do schema esperado."""

    default_reason = "xml_parse_failure"
