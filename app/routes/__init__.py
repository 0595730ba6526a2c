# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API del servicio de checkout.

Responsabilidades:
- Incluir el router de health (/health).
- Incluir el router del módulo Checkout (/checkout/*).

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from fastapi import APIRouter

from app.modules.checkout.routes import router as checkout_router

from .health_routes import router as health_router

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)

# Módulo Checkout (prefijo /checkout definido en su ensamblador)
router.include_router(checkout_router)

__all__ = ["router"]

# Fin del archivo backend/app/routes/__init__.py
