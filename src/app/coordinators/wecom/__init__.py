"""Coordenação do callback WeCom (mensagem em claro -> resposta)."""

from .inbound import process_inbound_message

__all__ = ["process_inbound_message"]
