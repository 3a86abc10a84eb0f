"""Connectors por canal: adapters de borda para plataformas externas.

Estrutura:
- wecom/: callback WeCom (handshake e envelope criptografado)
"""

__all__: list[str] = []
