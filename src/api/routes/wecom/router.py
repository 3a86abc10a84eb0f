"""Router principal do WeCom: agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.wecom.callback import router as callback_router

router = APIRouter()

# GET para handshake, POST para mensagens
router.include_router(callback_router)
