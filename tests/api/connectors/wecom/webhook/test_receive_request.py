"""Testes para abertura do envelope inbound e empacotamento da resposta."""

from __future__ import annotations

import pytest

from api.connectors.wecom import (
    CallbackQuery,
    InvalidEnvelopeError,
    InvalidSignatureError,
    pack_callback_reply,
    parse_callback_request,
)
from app.infra.crypto import EnvelopeCodec, MessageReply

TIMESTAMP = "1409659813"
NONCE = "1372623149"

MESSAGE_XML = (
    "<xml>"
    "<From><UserId><![CDATA[zhangsan]]></UserId><Name><![CDATA[Zhang]]></Name></From>"
    "<ChatId><![CDATA[chat-1]]></ChatId>"
    "<MsgId><![CDATA[msg-1]]></MsgId>"
    "<MsgType><![CDATA[text]]></MsgType>"
    "<Text><Content><![CDATA[@bot hello]]></Content></Text>"
    "</xml>"
)


def _inbound(codec: EnvelopeCodec, plaintext: str = MESSAGE_XML) -> tuple[CallbackQuery, bytes]:
    envelope = codec.encrypt(plaintext, TIMESTAMP, NONCE)
    body = f"<xml><ToUserName><![CDATA[bot]]></ToUserName><Encrypt><![CDATA[{envelope.encrypt}]]></Encrypt></xml>"
    query = CallbackQuery(msg_signature=envelope.signature, timestamp=TIMESTAMP, nonce=NONCE)
    return query, body.encode("utf-8")


class TestParseCallbackRequest:
    def test_returns_plain_message(self, codec: EnvelopeCodec) -> None:
        query, body = _inbound(codec)

        message = parse_callback_request(codec, query, body)

        assert message.content == "@bot hello"
        assert message.sender.user_id == "zhangsan"
        assert message.chat_id == "chat-1"
        assert message.msg_id == "msg-1"

    def test_invalid_signature(self, codec: EnvelopeCodec) -> None:
        query, body = _inbound(codec)
        tampered = CallbackQuery(msg_signature="0" * 40, timestamp=TIMESTAMP, nonce=NONCE)

        with pytest.raises(InvalidSignatureError):
            parse_callback_request(codec, tampered, body)

    def test_malformed_envelope(self, codec: EnvelopeCodec) -> None:
        query, _ = _inbound(codec)

        with pytest.raises(InvalidEnvelopeError, match="envelope_malformed"):
            parse_callback_request(codec, query, b"not xml")

    def test_empty_body(self, codec: EnvelopeCodec) -> None:
        query, _ = _inbound(codec)

        with pytest.raises(InvalidEnvelopeError, match="envelope_empty"):
            parse_callback_request(codec, query, b"")

    def test_non_xml_plaintext(self, codec: EnvelopeCodec) -> None:
        query, body = _inbound(codec, "hello")

        with pytest.raises(InvalidEnvelopeError, match="message_malformed"):
            parse_callback_request(codec, query, body)


class TestPackCallbackReply:
    def test_reply_round_trips(self, codec: EnvelopeCodec) -> None:
        query = CallbackQuery(msg_signature="unused", timestamp=TIMESTAMP, nonce=NONCE)

        body = pack_callback_reply(codec, query, MessageReply(content="pong"))

        assert f"<TimeStamp>{TIMESTAMP}</TimeStamp>".encode() in body
        signature = body.split(b"<MsgSignature><![CDATA[")[1].split(b"]]>")[0].decode()
        reply = codec.unpack_message(signature, TIMESTAMP, NONCE, body)
        assert reply.content == "pong"

    def test_reply_with_forbidden_character(self, codec: EnvelopeCodec) -> None:
        query = CallbackQuery(msg_signature="unused", timestamp=TIMESTAMP, nonce=NONCE)

        with pytest.raises(InvalidEnvelopeError, match="reply_not_xml_compatible"):
            pack_callback_reply(codec, query, MessageReply(content="bad \x00 byte"))
