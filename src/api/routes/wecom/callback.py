"""Endpoints do callback WeCom.

Endpoints:
- GET /callback/wecom: handshake de verificação de URL (echostr)
- POST /callback/wecom: mensagem criptografada -> resposta criptografada

Fluxo POST:
1. Valida msg_signature sobre o ciphertext do envelope
2. Descriptografa e parseia a mensagem em claro
3. Entrega ao handler de negócio (fallback em caso de falha)
4. Criptografa e assina a resposta ecoando timestamp/nonce

Mapeamento de erros:
- assinatura inválida -> 401
- query/envelope/XML inválidos -> 400
- codec não configurado -> 503
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status

from api.connectors.wecom.query import CallbackQuery, MissingQueryParamError
from api.connectors.wecom.webhook import (
    InvalidEnvelopeError,
    InvalidSignatureError,
    pack_callback_reply,
    parse_callback_request,
    verify_callback_challenge,
)
from app.bootstrap import get_envelope_codec, get_message_handler
from app.coordinators.wecom import process_inbound_message
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_wecom_settings
from utils.errors import CodecUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter()

XML_MEDIA_TYPE = "application/xml; charset=utf-8"


def _plain(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


def _failure(event: str, exc: Exception) -> Response:
    if isinstance(exc, InvalidSignatureError):
        status_code, content = status.HTTP_401_UNAUTHORIZED, "Unauthorized"
    elif isinstance(exc, CodecUnavailableError):
        status_code, content = status.HTTP_503_SERVICE_UNAVAILABLE, "Service Unavailable"
    else:
        status_code, content = status.HTTP_400_BAD_REQUEST, "Bad Request"

    logger.warning(
        event,
        extra={
            "channel": "wecom",
            "correlation_id": get_correlation_id(),
            "error_type": type(exc).__name__,
            "error": str(exc),
            "status_code": status_code,
        },
    )
    return _plain(content, status_code)


@router.get("/")
async def verify_callback(request: Request) -> Response:
    """Handshake: devolve o echostr descriptografado como texto puro."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        try:
            query = CallbackQuery.from_params(request.query_params)
            codec = get_envelope_codec()
            challenge = verify_callback_challenge(
                codec,
                query,
                request.query_params.get("echostr"),
            )
        except (MissingQueryParamError, InvalidEnvelopeError, InvalidSignatureError,
                CodecUnavailableError) as exc:
            return _failure("callback_verification_failed", exc)

        logger.info(
            "callback_verified",
            extra={"channel": "wecom", "correlation_id": get_correlation_id()},
        )
        return _plain(challenge, status.HTTP_200_OK)
    finally:
        reset_correlation_id(token)


@router.post("/")
async def receive_callback(request: Request) -> Response:
    """Recebe mensagem criptografada e responde com envelope criptografado."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        raw_body = await request.body()
        try:
            query = CallbackQuery.from_params(request.query_params)
            codec = get_envelope_codec()
            message = parse_callback_request(codec, query, raw_body)
        except (MissingQueryParamError, InvalidEnvelopeError, InvalidSignatureError,
                CodecUnavailableError) as exc:
            return _failure("callback_request_rejected", exc)

        logger.info(
            "callback_received",
            extra={
                "channel": "wecom",
                "correlation_id": get_correlation_id(),
                "msg_type": message.msg_type,
                "payload_size": len(raw_body),
            },
        )

        reply = await process_inbound_message(
            message,
            get_message_handler(),
            get_wecom_settings().fallback_reply,
        )

        try:
            body = pack_callback_reply(codec, query, reply)
        except InvalidEnvelopeError as exc:
            return _failure("callback_reply_pack_failed", exc)

        return Response(content=body, media_type=XML_MEDIA_TYPE, status_code=status.HTTP_200_OK)
    finally:
        reset_correlation_id(token)
