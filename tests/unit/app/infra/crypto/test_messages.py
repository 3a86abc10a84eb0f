"""Testes para o mapeamento XML das mensagens."""

from __future__ import annotations

import pytest

from app.infra.crypto.errors import XmlParseError
from app.infra.crypto.messages import (
    EncryptedEnvelope,
    MessageReply,
    parse_inbound_envelope,
    parse_message,
    serialize_envelope,
    serialize_reply,
)

INBOUND_MESSAGE = """<xml>
    <From>
        <UserId><![CDATA[zhangsan]]></UserId>
        <Name><![CDATA[张三]]></Name>
        <Alias><![CDATA[san]]></Alias>
    </From>
    <ChatId><![CDATA[wrkSFfCgAALFgnrSsWU38puSD2xxxx]]></ChatId>
    <MsgId>CAIQ16HMjQYY</MsgId>
    <MsgType>text</MsgType>
    <Text><Content><![CDATA[@bot 加班 1天]]></Content></Text>
</xml>"""


class TestParse:
    def test_parse_inbound_envelope(self) -> None:
        envelope = parse_inbound_envelope(
            b"<xml><ToUserName><![CDATA[ww1]]></ToUserName>"
            b"<Encrypt><![CDATA[Y2lwaGVy]]></Encrypt>"
            b"<AgentID><![CDATA[218]]></AgentID></xml>"
        )

        assert envelope.encrypt == "Y2lwaGVy"
        assert envelope.to_user_name == "ww1"
        assert envelope.agent_id == "218"

    @pytest.mark.parametrize(
        "body",
        [
            "<xml><ToUserName>ww1</ToUserName></xml>",
            "<xml><ToUserName>ww1</ToUserName><Encrypt></Encrypt></xml>",
            "<xml><Encrypt><![CDATA[]]></Encrypt></xml>",
        ],
    )
    def test_parse_inbound_envelope_requires_encrypt(self, body: str) -> None:
        with pytest.raises(XmlParseError, match="envelope_missing_encrypt"):
            parse_inbound_envelope(body)

    def test_parse_message_full(self) -> None:
        message = parse_message(INBOUND_MESSAGE)

        assert message.sender.user_id == "zhangsan"
        assert message.sender.name == "张三"
        assert message.sender.alias == "san"
        assert message.chat_id == "wrkSFfCgAALFgnrSsWU38puSD2xxxx"
        assert message.msg_id == "CAIQ16HMjQYY"
        assert message.msg_type == "text"
        assert message.content == "@bot 加班 1天"

    def test_parse_message_missing_fields_default_to_empty(self) -> None:
        message = parse_message(b"<xml><MsgType>event</MsgType></xml>")

        assert message.msg_type == "event"
        assert message.content == ""
        assert message.sender.alias == ""

    @pytest.mark.parametrize("payload", [b"", b"   ", "<xml><Text>", b"not xml at all"])
    def test_parse_message_rejects_malformed(self, payload: bytes | str) -> None:
        with pytest.raises(XmlParseError):
            parse_message(payload)

    def test_parse_does_not_expand_entities(self) -> None:
        payload = (
            b'<!DOCTYPE xml [<!ENTITY boom "expanded">]>'
            b"<xml><Text><Content>&boom;</Content></Text></xml>"
        )

        message = parse_message(payload)

        assert "expanded" not in message.content


class TestSerialize:
    def test_serialize_reply(self) -> None:
        body = serialize_reply(MessageReply(content="this is a text"))

        assert body == (
            b"<xml><MsgType>text</MsgType>"
            b"<Text><Content><![CDATA[this is a text]]></Content></Text></xml>"
        )

    def test_serialize_reply_with_mentions(self) -> None:
        body = serialize_reply(MessageReply(content="oi", mentioned=("zhangsan", "lisi")))

        assert b"<MentionedList><Item><![CDATA[zhangsan]]></Item>" in body
        assert b"<Item><![CDATA[lisi]]></Item></MentionedList></Text>" in body

    def test_serialize_reply_escapes_cdata_terminator(self) -> None:
        body = serialize_reply(MessageReply(content="a]]>b <c>"))

        assert parse_message(body).content == "a]]>b <c>"

    def test_serialize_reply_rejects_control_characters(self) -> None:
        with pytest.raises(XmlParseError, match="reply_not_xml_compatible"):
            serialize_reply(MessageReply(content="bad\x00value"))

    def test_reply_roundtrips_through_message_parser(self) -> None:
        body = serialize_reply(MessageReply(content="余额 2.5 天"))
        message = parse_message(body)

        assert message.msg_type == "text"
        assert message.content == "余额 2.5 天"

    def test_serialize_envelope(self) -> None:
        body = serialize_envelope(
            EncryptedEnvelope(encrypt="abc+/=", signature="sig", timestamp="1409659813", nonce="n<1>")
        )

        assert body == (
            b"<xml><Encrypt><![CDATA[abc+/=]]></Encrypt>"
            b"<MsgSignature><![CDATA[sig]]></MsgSignature>"
            b"<Nonce><![CDATA[n<1>]]></Nonce>"
            b"<TimeStamp>1409659813</TimeStamp></xml>"
        )

    def test_serialize_envelope_escapes_timestamp(self) -> None:
        body = serialize_envelope(
            EncryptedEnvelope(encrypt="e", signature="s", timestamp="1<2", nonce="n")
        )

        assert b"<TimeStamp>1&lt;2</TimeStamp>" in body
