"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e constrói o codec
do callback uma única vez (KeyContext imutável compartilhado).

Uso:
    from app.bootstrap import initialize_app, get_envelope_codec

    initialize_app()
    codec = get_envelope_codec()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.infra.crypto import EnvelopeCodec, KeyContext, WecomCryptoError
from app.observability import get_correlation_id
from app.services import EchoMessageHandler
from config.logging import configure_logging
from config.settings import get_base_settings, get_wecom_settings
from utils.errors import CodecUnavailableError

if TYPE_CHECKING:
    from app.protocols import EnvelopeCodecProtocol, MessageHandlerProtocol

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging JSON com correlation_id e mascaramento de segredos.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        redacted_values=get_wecom_settings().secret_values(),
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido (inclusive chave que não
    decodifica). Em `development` apenas registra alerta.
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"wecom: {error}" for error in get_wecom_settings().validate())

    if not errors:
        try:
            get_envelope_codec()
        except CodecUnavailableError as exc:
            errors.append(f"wecom: {exc}")

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.requires_strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_envelope_codec() -> EnvelopeCodecProtocol:
    """Obtém o codec do callback (singleton).

    Raises:
        CodecUnavailableError: Credenciais ausentes ou EncodingAESKey inválida.
    """
    settings = get_wecom_settings()
    if not settings.is_configured:
        raise CodecUnavailableError("wecom credentials not configured")
    try:
        context = KeyContext.from_encoding_key(
            settings.encoding_aes_key,
            settings.token,
            receive_id=settings.receive_id,
        )
    except WecomCryptoError as exc:
        raise CodecUnavailableError(exc.reason) from exc
    return EnvelopeCodec(context, strict_padding=settings.strict_padding)


@lru_cache(maxsize=1)
def get_message_handler() -> MessageHandlerProtocol:
    """Obtém o handler de mensagens (singleton)."""
    return EchoMessageHandler()
