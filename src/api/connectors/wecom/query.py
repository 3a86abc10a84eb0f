"""Query params do callback WeCom."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class MissingQueryParamError(ValueError):
    """Parâmetro obrigatório ausente na query string."""


@dataclass(frozen=True, slots=True)
class CallbackQuery:
    """Parâmetros de transporte que acompanham todo request do callback.

    `timestamp` e `nonce` são opacos: só ecoados e assinados.
    """

    msg_signature: str
    timestamp: str
    nonce: str

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> CallbackQuery:
        """Extrai e exige msg_signature, timestamp e nonce.

        Raises:
            MissingQueryParamError: Se algum estiver ausente ou vazio.
        """
        values = {name: params.get(name) or "" for name in ("msg_signature", "timestamp", "nonce")}
        missing = sorted(name for name, value in values.items() if not value)
        if missing:
            raise MissingQueryParamError(f"missing_{'_'.join(missing)}")
        return cls(**values)
