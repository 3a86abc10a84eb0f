"""Framing e padding do plaintext do callback.

Formato do frame (antes do padding):

    random_prefix (16) | length (uint32 big-endian) | message | receive_id

O padding segue o esquema da plataforma: `p` bytes de valor `p` com bloco
de 32 bytes (o dobro do bloco do AES). Não é o PKCS#7 de 16 bytes usado
pelo `cryptography`, por isso é implementado aqui.
"""

from __future__ import annotations

import secrets
import string
import struct
from dataclasses import dataclass

from .constants import (
    FRAME_HEADER_SIZE,
    PADDING_BLOCK_SIZE,
    RANDOM_PREFIX_SIZE,
)
from .errors import InvalidPaddingError, MalformedFrameError

_PREFIX_ALPHABET = (string.digits + string.ascii_letters).encode("ascii")
_LENGTH = struct.Struct(">I")


@dataclass(frozen=True, slots=True)
class PlainFrame:
    """Frame de plaintext já sem padding."""

    random_prefix: bytes
    message: bytes
    receive_id: bytes = b""

    @property
    def length(self) -> int:
        return len(self.message)

    @property
    def message_text(self) -> str:
        """Mensagem decodificada como UTF-8.

        Raises:
            MalformedFrameError: Se a mensagem não for UTF-8 válido.
        """
        try:
            return self.message.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedFrameError("message_not_utf8") from exc

    @property
    def receive_id_text(self) -> str:
        return self.receive_id.decode("utf-8", errors="replace")


def random_prefix(size: int = RANDOM_PREFIX_SIZE) -> bytes:
    """Gera prefixo alfanumérico com fonte criptograficamente segura."""
    return bytes(secrets.choice(_PREFIX_ALPHABET) for _ in range(size))


def frame(
    message: bytes,
    receive_id: bytes = b"",
    prefix: bytes | None = None,
) -> bytes:
    """Monta o frame `prefix | len | message | receive_id`.

    Args:
        message: Mensagem em bytes (normalmente XML UTF-8).
        receive_id: Corp/bot id anexado ao final (pode ser vazio).
        prefix: Prefixo de 16 bytes; gerado quando None.

    Raises:
        ValueError: Se o prefixo informado não tiver 16 bytes.
    """
    if prefix is None:
        prefix = random_prefix()
    elif len(prefix) != RANDOM_PREFIX_SIZE:
        raise ValueError(f"prefix deve ter {RANDOM_PREFIX_SIZE} bytes")
    return b"".join((prefix, _LENGTH.pack(len(message)), message, receive_id))


def unframe(data: bytes) -> PlainFrame:
    """Separa prefixo, mensagem e receive id de um frame sem padding.

    Raises:
        MalformedFrameError: Se o frame for menor que o cabeçalho ou que o
            tamanho declarado.
    """
    if len(data) < FRAME_HEADER_SIZE:
        raise MalformedFrameError("frame_too_short")

    (length,) = _LENGTH.unpack_from(data, RANDOM_PREFIX_SIZE)
    end = FRAME_HEADER_SIZE + length
    if len(data) < end:
        raise MalformedFrameError("frame_length_exceeds_data")

    return PlainFrame(
        random_prefix=data[:RANDOM_PREFIX_SIZE],
        message=data[FRAME_HEADER_SIZE:end],
        receive_id=data[end:],
    )


def pad(data: bytes, block_size: int = PADDING_BLOCK_SIZE) -> bytes:
    """Aplica padding `p` bytes de valor `p` (1..block_size).

    Dado já alinhado recebe um bloco inteiro de padding.
    """
    if not 0 < block_size < 256:
        raise ValueError("block_size deve estar entre 1 e 255")
    amount = block_size - (len(data) % block_size)
    return data + bytes([amount]) * amount


def unpad(
    data: bytes,
    block_size: int = PADDING_BLOCK_SIZE,
    strict: bool = True,
) -> bytes:
    """Remove o padding lido do último byte.

    Args:
        data: Plaintext descriptografado.
        block_size: Bloco usado no padding (32 na plataforma).
        strict: Também exige `p <= block_size` e que todos os `p` bytes
            finais valham `p`. Com False, só o último byte é conferido,
            como no comportamento legado da plataforma.

    Raises:
        InvalidPaddingError: Se o padding for inconsistente.
    """
    if not data:
        raise InvalidPaddingError("empty_plaintext")

    amount = data[-1]
    if amount == 0 or amount > len(data):
        raise InvalidPaddingError("padding_out_of_range")

    if strict:
        if amount > block_size:
            raise InvalidPaddingError("padding_exceeds_block")
        if data[-amount:] != bytes([amount]) * amount:
            raise InvalidPaddingError("padding_bytes_mismatch")

    return data[:-amount]
