"""Filters de logging para contexto e proteção de segredos.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço

Segredos configurados (token, EncodingAESKey) são mascarados na mensagem
renderizada antes de chegar ao formatter.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[REDACTED]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record (nunca descarta)."""
        # correlation_id passado via `extra` tem prioridade
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Mascara valores secretos na mensagem do record.

    A mensagem é renderizada (msg % args) uma vez e substituída pela versão
    mascarada; args são descartados para o formatter não reinterpolar.
    """

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        super().__init__()
        # Mais longos primeiro: um segredo pode conter outro
        self._secrets = tuple(sorted({s for s in secrets if s}, key=len, reverse=True))

    def redact(self, text: str) -> str:
        for secret in self._secrets:
            text = text.replace(secret, REDACTED)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # args incompatíveis: o handler reporta via handleError
            return True
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
