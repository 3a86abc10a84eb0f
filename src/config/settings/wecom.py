"""Settings específicas do callback WeCom.

Credenciais do app/robô configuradas no console da plataforma.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

ENCODING_AES_KEY_LENGTH = 43
DEFAULT_FALLBACK_REPLY = "Não entendi a mensagem. Tente novamente."


@dataclass(frozen=True)
class WecomSettings:
    """Configurações do callback WeCom.

    Attributes:
        token: Token usado na assinatura (msg_signature)
        encoding_aes_key: EncodingAESKey (43 caracteres base64)
        receive_id: Corp id / bot id anexado aos frames (opcional)
        strict_padding: Valida todos os bytes de padding (não só o último)
        fallback_reply: Texto respondido quando o handler falha
    """

    token: str = field(default="", repr=False)
    encoding_aes_key: str = field(default="", repr=False)
    receive_id: str = ""
    strict_padding: bool = True
    fallback_reply: str = DEFAULT_FALLBACK_REPLY

    @property
    def is_configured(self) -> bool:
        return bool(self.token and self.encoding_aes_key)

    def secret_values(self) -> tuple[str, ...]:
        """Valores que nunca podem aparecer em logs."""
        return tuple(v for v in (self.token, self.encoding_aes_key) if v)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do callback.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.token:
            errors.append("WECOM_TOKEN não configurado")

        if not self.encoding_aes_key:
            errors.append("WECOM_ENCODING_AES_KEY não configurado")
        elif len(self.encoding_aes_key) != ENCODING_AES_KEY_LENGTH:
            errors.append(
                f"WECOM_ENCODING_AES_KEY deve ter {ENCODING_AES_KEY_LENGTH} caracteres"
            )

        return errors


def _load_from_env() -> WecomSettings:
    """Carrega WecomSettings a partir de variáveis de ambiente."""
    return WecomSettings(
        token=os.getenv("WECOM_TOKEN", ""),
        encoding_aes_key=os.getenv("WECOM_ENCODING_AES_KEY", "").strip(),
        receive_id=os.getenv("WECOM_RECEIVE_ID", ""),
        strict_padding=os.getenv("WECOM_STRICT_PADDING", "true").lower() in ("true", "1", "yes"),
        fallback_reply=os.getenv("WECOM_FALLBACK_REPLY", DEFAULT_FALLBACK_REPLY),
    )


@lru_cache(maxsize=1)
def get_wecom_settings() -> WecomSettings:
    """Retorna instância cacheada de WecomSettings."""
    return _load_from_env()
