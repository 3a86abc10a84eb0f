"""Testes para KeyContext e decodificação da EncodingAESKey."""

from __future__ import annotations

import base64
import dataclasses

import pytest

from app.infra.crypto.errors import InvalidKeyError
from app.infra.crypto.keys import KeyContext, decode_encoding_aes_key

ENCODING_AES_KEY = "jWmYm7qr5nMoAUwZRjGtBxmz3KA1tkAj3ykkR6q2B2C"


def test_decode_encoding_aes_key_returns_32_bytes() -> None:
    key = decode_encoding_aes_key(ENCODING_AES_KEY)

    assert len(key) == 32
    assert key == base64.b64decode(ENCODING_AES_KEY + "=")


def test_key_context_iv_is_key_prefix() -> None:
    context = KeyContext.from_encoding_key(ENCODING_AES_KEY, "token")

    assert context.iv == context.key[:16]
    assert context.token == "token"
    assert context.receive_id == ""


@pytest.mark.parametrize(
    "value",
    [
        "not*base64*at*all*but*exactly*43*chars*xxx",
        "abc",
        "",
        ENCODING_AES_KEY[:-1],
        ENCODING_AES_KEY + "A",
    ],
)
def test_decode_encoding_aes_key_rejects_invalid_material(value: str) -> None:
    with pytest.raises(InvalidKeyError):
        decode_encoding_aes_key(value)


def test_decode_encoding_aes_key_reports_non_alphabet_input() -> None:
    with pytest.raises(InvalidKeyError) as exc_info:
        decode_encoding_aes_key("%" * 43)
    assert exc_info.value.reason == "invalid_key_encoding"


def test_decode_encoding_aes_key_reports_wrong_size() -> None:
    sixteen_bytes = base64.b64encode(b"k" * 16).decode()[:-1]
    with pytest.raises(InvalidKeyError) as exc_info:
        decode_encoding_aes_key(sixteen_bytes)
    assert exc_info.value.reason == "invalid_key_size"


def test_key_context_rejects_wrong_raw_key_size() -> None:
    with pytest.raises(InvalidKeyError, match="invalid_key_size"):
        KeyContext(key=b"short", token="t")


def test_key_context_is_immutable() -> None:
    context = KeyContext.from_encoding_key(ENCODING_AES_KEY, "token")
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.token = "other"  # type: ignore[misc]


def test_key_context_repr_hides_secrets() -> None:
    context = KeyContext.from_encoding_key(ENCODING_AES_KEY, "super-secret-token")
    text = repr(context)

    assert "super-secret-token" not in text
    assert repr(context.key) not in text
