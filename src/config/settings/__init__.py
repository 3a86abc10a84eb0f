"""Agregador de settings do serviço de callback.

Re-exporta as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.wecom import (
    WecomSettings,
    get_wecom_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "WecomSettings",
    "get_base_settings",
    "get_wecom_settings",
]
