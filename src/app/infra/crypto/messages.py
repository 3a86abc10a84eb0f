"""Mapeamento XML das mensagens do callback WeCom.

Schemas tratados:
- envelope inbound: `<xml><ToUserName/><Encrypt/><AgentID/></xml>`
- mensagem em claro: `From/{UserId,Name,Alias}`, `MsgType`, `MsgId`,
  `ChatId`, `Text/Content`
- resposta em claro: `<xml><MsgType/><Text><Content/>[<MentionedList/>]</Text></xml>`
- envelope outbound: `Encrypt`, `MsgSignature`, `Nonce` (CDATA) e
  `TimeStamp` (texto simples)

O parser é endurecido: sem resolução de entidades e sem acesso à rede.
"""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from .errors import XmlParseError

ROOT_TAG = "xml"
MSG_TYPE_TEXT = "text"

_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_blank_text=True,
    huge_tree=False,
)


@dataclass(frozen=True, slots=True)
class InboundEnvelope:
    """Envelope XML recebido no POST do callback."""

    encrypt: str
    to_user_name: str = ""
    agent_id: str = ""


@dataclass(frozen=True, slots=True)
class EncryptedEnvelope:
    """Resposta criptografada e assinada pronta para o wire."""

    encrypt: str
    signature: str
    timestamp: str
    nonce: str


@dataclass(frozen=True, slots=True)
class MessageSender:
    user_id: str = ""
    name: str = ""
    alias: str = ""


@dataclass(frozen=True, slots=True)
class InboundMessage:
    """Mensagem descriptografada entregue à camada de negócio."""

    sender: MessageSender
    msg_type: str = ""
    msg_id: str = ""
    chat_id: str = ""
    content: str = ""


@dataclass(frozen=True, slots=True)
class MessageReply:
    """Resposta em claro produzida pela camada de negócio."""

    content: str
    msg_type: str = MSG_TYPE_TEXT
    mentioned: tuple[str, ...] = ()


def _parse(data: bytes | str, what: str) -> etree._Element:
    raw = data.encode("utf-8") if isinstance(data, str) else data
    if not raw or not raw.strip():
        raise XmlParseError(f"{what}_empty")
    try:
        return etree.fromstring(raw, parser=_PARSER)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise XmlParseError(f"{what}_malformed") from exc


def _text(root: etree._Element, path: str) -> str:
    return root.findtext(path, default="") or ""


def _set_cdata(element: etree._Element, value: str) -> None:
    # CDATA não pode conter "]]>"; nesse caso o lxml escapa como texto comum
    if "]]>" in value:
        element.text = value
    else:
        element.text = etree.CDATA(value)


def _to_bytes(root: etree._Element) -> bytes:
    return etree.tostring(root, encoding="utf-8", xml_declaration=False)


def parse_inbound_envelope(body: bytes | str) -> InboundEnvelope:
    """Lê o envelope inbound.

    Raises:
        XmlParseError: Se o XML for inválido ou não tiver `Encrypt`.
    """
    root = _parse(body, "envelope")
    encrypt = _text(root, "Encrypt")
    if not encrypt:
        raise XmlParseError("envelope_missing_encrypt")
    return InboundEnvelope(
        encrypt=encrypt,
        to_user_name=_text(root, "ToUserName"),
        agent_id=_text(root, "AgentID"),
    )


def parse_message(plaintext: bytes | str) -> InboundMessage:
    """Converte o XML em claro em InboundMessage.

    Elementos ausentes viram string vazia; a validade semântica é
    responsabilidade da camada de negócio.
    """
    root = _parse(plaintext, "message")
    return InboundMessage(
        sender=MessageSender(
            user_id=_text(root, "From/UserId"),
            name=_text(root, "From/Name"),
            alias=_text(root, "From/Alias"),
        ),
        msg_type=_text(root, "MsgType"),
        msg_id=_text(root, "MsgId"),
        chat_id=_text(root, "ChatId"),
        content=_text(root, "Text/Content"),
    )


def serialize_reply(reply: MessageReply) -> bytes:
    """Serializa a resposta em claro (antes da criptografia).

    Raises:
        XmlParseError: Se algum valor tiver caracteres proibidos em XML.
    """
    root = etree.Element(ROOT_TAG)
    try:
        etree.SubElement(root, "MsgType").text = reply.msg_type
        text = etree.SubElement(root, "Text")
        _set_cdata(etree.SubElement(text, "Content"), reply.content)
        if reply.mentioned:
            mentioned = etree.SubElement(text, "MentionedList")
            for user_id in reply.mentioned:
                _set_cdata(etree.SubElement(mentioned, "Item"), user_id)
    except ValueError as exc:
        raise XmlParseError("reply_not_xml_compatible") from exc
    return _to_bytes(root)


def serialize_envelope(envelope: EncryptedEnvelope) -> bytes:
    """Serializa o envelope outbound devolvido no corpo HTTP."""
    root = etree.Element(ROOT_TAG)
    try:
        _set_cdata(etree.SubElement(root, "Encrypt"), envelope.encrypt)
        _set_cdata(etree.SubElement(root, "MsgSignature"), envelope.signature)
        _set_cdata(etree.SubElement(root, "Nonce"), envelope.nonce)
        etree.SubElement(root, "TimeStamp").text = envelope.timestamp
    except ValueError as exc:
        raise XmlParseError("envelope_not_xml_compatible") from exc
    return _to_bytes(root)
