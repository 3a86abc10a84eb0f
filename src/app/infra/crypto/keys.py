"""Material de chave do callback (EncodingAESKey + token)."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field

from .constants import AES_KEY_SIZE, IV_SIZE
from .errors import InvalidKeyError


def decode_encoding_aes_key(encoding_aes_key: str) -> bytes:
    """Decodifica a EncodingAESKey da plataforma em 32 bytes brutos.

    A plataforma publica a chave com 43 caracteres base64; o "=" final é
    acrescentado aqui antes da decodificação padrão.

    Args:
        encoding_aes_key: Chave configurada (43 caracteres).

    Returns:
        Chave AES-256 bruta.

    Raises:
        InvalidKeyError: Se a decodificação falhar ou o tamanho não for 32.
    """
    try:
        key = base64.b64decode(encoding_aes_key + "=", validate=True)
    except (ValueError, binascii.Error) as exc:
        raise InvalidKeyError("invalid_key_encoding") from exc

    if len(key) != AES_KEY_SIZE:
        raise InvalidKeyError("invalid_key_size")
    return key


@dataclass(frozen=True, slots=True)
class KeyContext:
    """Chave, IV e token compartilhados (somente leitura).

    Construído uma vez no startup e compartilhado entre requests.

    Attributes:
        key: Chave AES-256 bruta.
        token: Token de assinatura configurado na plataforma.
        receive_id: Corp/bot id anexado aos frames (vazio = não usado).
    """

    key: bytes = field(repr=False)
    token: str = field(repr=False)
    receive_id: str = ""

    def __post_init__(self) -> None:
        if len(self.key) != AES_KEY_SIZE:
            raise InvalidKeyError("invalid_key_size")

    @property
    def iv(self) -> bytes:
        """IV fixo: os primeiros 16 bytes da chave (herdado do protocolo)."""
        return self.key[:IV_SIZE]

    @classmethod
    def from_encoding_key(
        cls,
        encoding_aes_key: str,
        token: str,
        receive_id: str = "",
    ) -> KeyContext:
        """Cria o contexto a partir da configuração da plataforma."""
        return cls(
            key=decode_encoding_aes_key(encoding_aes_key),
            token=token,
            receive_id=receive_id,
        )
