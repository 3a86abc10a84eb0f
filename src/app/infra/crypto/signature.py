"""Assinatura SHA-1 do callback (msg_signature)."""

from __future__ import annotations

import hashlib
import hmac


def compute_signature(token: str, timestamp: str, nonce: str, data: str) -> str:
    """Calcula a assinatura da plataforma.

    Os quatro campos são ordenados (ordem ordinal), concatenados sem
    separador e passados por SHA-1. A ordem dos argumentos não importa.

    Returns:
        Digest em hexadecimal minúsculo (40 caracteres).
    """
    joined = "".join(sorted((token, timestamp, nonce, data)))
    return hashlib.sha1(joined.encode("utf-8")).hexdigest()


def verify_signature(
    signature: str,
    token: str,
    timestamp: str,
    nonce: str,
    data: str,
) -> bool:
    """Valida assinatura recebida (comparação exata, case-sensitive)."""
    expected = compute_signature(token, timestamp, nonce, data)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


class SignatureVerifier:
    """Assina e valida com o token configurado."""

    __slots__ = ("_token",)

    def __init__(self, token: str) -> None:
        self._token = token

    def sign(self, timestamp: str, nonce: str, data: str) -> str:
        return compute_signature(self._token, timestamp, nonce, data)

    def verify(self, signature: str, timestamp: str, nonce: str, data: str) -> bool:
        return verify_signature(signature, self._token, timestamp, nonce, data)
