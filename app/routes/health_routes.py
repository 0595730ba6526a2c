# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint básico de health check del servicio de checkout.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.core.settings import get_settings
from app.modules.checkout.dependencies import CheckoutEngine, get_checkout_engine

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del servicio",
    description=(
        "Devuelve el estado básico del servicio, incluyendo conteo de "
        "sesiones, transacciones y liquidaciones pendientes."
    ),
)
async def health_check(engine: CheckoutEngine = Depends(get_checkout_engine)) -> dict:
    """
    Health check básico del servicio.

    Returns:
        dict: información mínima de estado de la aplicación.
    """
    settings = get_settings()

    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "environment": settings.python_env,
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
        "checkout": engine.health_snapshot(),
    }

# Fin del archivo backend/app/routes/health_routes.py
