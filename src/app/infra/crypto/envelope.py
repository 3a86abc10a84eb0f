"""Codec de envelope do callback WeCom (inbound e outbound).

Inbound:  assinatura -> base64 -> AES-CBC -> unpad(32) -> unframe -> XML
Outbound: XML -> frame -> pad(32) -> AES-CBC -> base64 -> assinatura

A assinatura cobre o ciphertext em base64, e é conferida antes de qualquer
descriptografia. Cada chamada é independente; o único estado é o
KeyContext imutável, portanto a instância pode ser compartilhada entre
threads e tasks.
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterable

from .cipher import CipherTransform
from .constants import CIPHER_BLOCK_SIZE, PADDING_BLOCK_SIZE
from .errors import (
    MalformedCiphertextError,
    ReceiveIdMismatchError,
    SignatureInvalidError,
)
from .framing import PlainFrame, frame, pad, unframe, unpad
from .keys import KeyContext
from .messages import (
    EncryptedEnvelope,
    InboundMessage,
    MessageReply,
    parse_inbound_envelope,
    parse_message,
    serialize_envelope,
    serialize_reply,
)
from .signature import SignatureVerifier


class EnvelopeCodec:
    """Descriptografa/verifica envelopes recebidos e assina/criptografa respostas."""

    def __init__(
        self,
        context: KeyContext,
        *,
        padding_block_size: int = PADDING_BLOCK_SIZE,
        strict_padding: bool = True,
    ) -> None:
        if padding_block_size <= 0 or padding_block_size % CIPHER_BLOCK_SIZE != 0:
            raise ValueError(
                f"padding_block_size deve ser múltiplo positivo de {CIPHER_BLOCK_SIZE}"
            )
        self._context = context
        self._cipher = CipherTransform(context)
        self._verifier = SignatureVerifier(context.token)
        self._padding_block_size = padding_block_size
        self._strict_padding = strict_padding

    @property
    def context(self) -> KeyContext:
        return self._context

    # ──────────────────────────────────────────────────────────────────
    # Núcleo
    # ──────────────────────────────────────────────────────────────────

    def decrypt(
        self,
        signature: str,
        timestamp: str,
        nonce: str,
        encrypted_text: str,
    ) -> PlainFrame:
        """Valida assinatura e descriptografa o ciphertext em um frame.

        Raises:
            SignatureInvalidError: Assinatura não confere (nada é descriptografado).
            MalformedCiphertextError: Ciphertext ausente, não-base64 ou desalinhado.
            InvalidPaddingError: Padding inconsistente após descriptografia.
            MalformedFrameError: Tamanho declarado maior que os dados.
            ReceiveIdMismatchError: Receive id diferente do configurado.
        """
        if not self._verifier.verify(signature, timestamp, nonce, encrypted_text):
            raise SignatureInvalidError()

        if not encrypted_text:
            raise MalformedCiphertextError("missing_ciphertext")
        try:
            ciphertext = base64.b64decode(encrypted_text, validate=True)
        except (ValueError, binascii.Error) as exc:
            raise MalformedCiphertextError("ciphertext_not_base64") from exc

        padded = self._cipher.decrypt(ciphertext)
        plain = unframe(
            unpad(padded, self._padding_block_size, strict=self._strict_padding)
        )

        expected_id = self._context.receive_id
        if expected_id and plain.receive_id != expected_id.encode("utf-8"):
            raise ReceiveIdMismatchError()
        return plain

    def decode(
        self,
        signature: str,
        timestamp: str,
        nonce: str,
        encrypted_text: str,
    ) -> str:
        """Igual a decrypt(), retornando só a mensagem como texto."""
        return self.decrypt(signature, timestamp, nonce, encrypted_text).message_text

    def encrypt(self, plaintext: str | bytes, timestamp: str, nonce: str) -> EncryptedEnvelope:
        """Enquadra, criptografa e assina uma mensagem em claro."""
        message = plaintext.encode("utf-8") if isinstance(plaintext, str) else plaintext
        framed = frame(message, self._context.receive_id.encode("utf-8"))
        ciphertext = self._cipher.encrypt(pad(framed, self._padding_block_size))
        encoded = base64.b64encode(ciphertext).decode("ascii")
        return EncryptedEnvelope(
            encrypt=encoded,
            signature=self._verifier.sign(timestamp, nonce, encoded),
            timestamp=timestamp,
            nonce=nonce,
        )

    def encode(self, plaintext: str | bytes, timestamp: str, nonce: str) -> tuple[str, str]:
        """Retorna (ciphertext_base64, assinatura_hex)."""
        envelope = self.encrypt(plaintext, timestamp, nonce)
        return envelope.encrypt, envelope.signature

    # ──────────────────────────────────────────────────────────────────
    # Fluxos do callback
    # ──────────────────────────────────────────────────────────────────

    def verify_url(self, signature: str, timestamp: str, nonce: str, echostr: str) -> str:
        """Handshake de verificação de URL: devolve o echostr em claro."""
        return self.decode(signature, timestamp, nonce, echostr)

    def unpack_message(
        self,
        signature: str,
        timestamp: str,
        nonce: str,
        body: bytes | str,
    ) -> InboundMessage:
        """Lê o envelope XML do POST e devolve a mensagem em claro.

        Raises:
            XmlParseError: Envelope ou mensagem em claro malformados.
            WecomCryptoError: Demais falhas de decrypt().
        """
        envelope = parse_inbound_envelope(body)
        plaintext = self.decrypt(signature, timestamp, nonce, envelope.encrypt).message
        return parse_message(plaintext)

    def pack_reply(
        self,
        reply: MessageReply,
        timestamp: str,
        nonce: str,
    ) -> tuple[EncryptedEnvelope, bytes]:
        """Criptografa a resposta e serializa o envelope outbound."""
        envelope = self.encrypt(serialize_reply(reply), timestamp, nonce)
        return envelope, serialize_envelope(envelope)

    @staticmethod
    def reply_text(content: str, mentioned: Iterable[str] = ()) -> MessageReply:
        """Monta resposta de texto (com menções opcionais)."""
        return MessageReply(content=content, mentioned=tuple(mentioned))
