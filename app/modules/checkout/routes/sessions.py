# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/routes/sessions.py

Rutas de sesiones de checkout.

Endpoints:
- POST /checkout/session
- GET  /checkout/session/{session_id}

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.modules.checkout.dependencies import CheckoutEngine, get_checkout_engine
from app.modules.checkout.errors import CheckoutError
from app.modules.checkout.schemas import (
    CreateSessionRequest,
    CreateSessionResponse,
    SessionOut,
)

from .errors import to_http_exception

router = APIRouter(tags=["checkout:sessions"])


@router.post(
    "/session",
    response_model=CreateSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_checkout_session(
    payload: CreateSessionRequest,
    engine: CheckoutEngine = Depends(get_checkout_engine),
):
    """
    Abre una sesión de checkout a partir del snapshot del carrito.
    """
    try:
        session = engine.sessions.create_session(
            payload.user_id,
            [item.to_domain() for item in payload.items],
            currency=payload.currency,
            shipping_address=payload.shipping_address,
            billing_address=payload.billing_address,
        )
    except CheckoutError as e:
        raise to_http_exception(e)

    return CreateSessionResponse(session=SessionOut.model_validate(session))


@router.get(
    "/session/{session_id}",
    response_model=SessionOut,
)
async def get_checkout_session(
    session_id: str,
    engine: CheckoutEngine = Depends(get_checkout_engine),
):
    try:
        session = engine.sessions.get_session(session_id)
    except CheckoutError as e:
        raise to_http_exception(e)
    return SessionOut.model_validate(session)


__all__ = ["router"]

# Fin del archivo backend/app/modules/checkout/routes/sessions.py
