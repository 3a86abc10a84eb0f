"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (callback, health)
- Leitura de query params e corpo bruto
- Delegação para connectors/coordinators
- Respostas HTTP apropriadas

Estrutura:
- routes/wecom/: callback WeCom
- routes/health/: liveness e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
