"""AES-256-CBC do callback WeCom.

ATENÇÃO: o protocolo usa IV fixo (`key[:16]`) em todas as operações.
É uma fraqueza criptográfica conhecida (mesmo plaintext inicial gera o
mesmo ciphertext inicial), mas trocar o IV quebra a compatibilidade com a
plataforma. O comportamento é mantido bit a bit.
"""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .constants import CIPHER_BLOCK_SIZE
from .errors import MalformedCiphertextError
from .keys import KeyContext


class CipherTransform:
    """Criptografia CBC sem estado além do KeyContext."""

    __slots__ = ("_context",)

    def __init__(self, context: KeyContext) -> None:
        self._context = context

    def _cipher(self) -> Cipher:
        return Cipher(algorithms.AES(self._context.key), modes.CBC(self._context.iv))

    def encrypt(self, plaintext: bytes) -> bytes:
        """Criptografa plaintext já alinhado ao bloco de 16 bytes.

        Raises:
            MalformedCiphertextError: Se o plaintext não estiver alinhado.
        """
        if len(plaintext) % CIPHER_BLOCK_SIZE != 0:
            raise MalformedCiphertextError("plaintext_not_block_aligned")
        encryptor = self._cipher().encryptor()
        return encryptor.update(plaintext) + encryptor.finalize()

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Descriptografa ciphertext CBC (padding é removido por quem chama).

        Raises:
            MalformedCiphertextError: Se vazio ou fora do tamanho de bloco.
        """
        if not ciphertext:
            raise MalformedCiphertextError("empty_ciphertext")
        if len(ciphertext) % CIPHER_BLOCK_SIZE != 0:
            raise MalformedCiphertextError("ciphertext_not_block_aligned")
        decryptor = self._cipher().decryptor()
        return decryptor.update(ciphertext) + decryptor.finalize()
