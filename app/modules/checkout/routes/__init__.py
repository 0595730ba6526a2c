# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/routes/__init__.py

Ensamblador de rutas REST del módulo Checkout.

Incluye:
- /checkout/session, /checkout/session/{session_id}
- /checkout/payment, /checkout/payment/{transaction_id}/status
- /checkout/payment/{transaction_id}/refund, /checkout/refunds/{refund_id}
- /checkout/payment-methods, /checkout/shipping
- /checkout/metrics

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from fastapi import APIRouter

from .catalog import router as catalog_router
from .metrics import router as metrics_router
from .payments import router as payments_router
from .refunds import router as refunds_router
from .sessions import router as sessions_router

router = APIRouter()

# Prefijo común /checkout para todas las rutas del módulo
router.include_router(sessions_router, prefix="/checkout")
router.include_router(payments_router, prefix="/checkout")
router.include_router(refunds_router, prefix="/checkout")
router.include_router(catalog_router, prefix="/checkout")
router.include_router(metrics_router, prefix="/checkout")

__all__ = ["router"]

# Fin del archivo backend/app/modules/checkout/routes/__init__.py
