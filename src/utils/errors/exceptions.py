"""Exceções de infraestrutura compartilhadas."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura/configuração do serviço."""


class CodecUnavailableError(InfrastructureError):
    """Codec do callback não pôde ser construído (credenciais ausentes/inválidas)."""
