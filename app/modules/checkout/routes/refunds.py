# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/routes/refunds.py

Rutas de reembolsos.

Endpoints:
- POST /checkout/payment/{transaction_id}/refund
- GET  /checkout/refunds/{refund_id}

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends

from app.modules.checkout.dependencies import CheckoutEngine, get_checkout_engine
from app.modules.checkout.errors import CheckoutError
from app.modules.checkout.schemas import (
    RefundCreate,
    RefundOut,
    RefundResponse,
    TransactionStatusResponse,
)

from .errors import to_http_exception

router = APIRouter(tags=["checkout:refunds"])


@router.post(
    "/payment/{transaction_id}/refund",
    response_model=RefundResponse,
)
async def request_refund(
    transaction_id: str,
    payload: Optional[RefundCreate] = Body(default=None),
    engine: CheckoutEngine = Depends(get_checkout_engine),
):
    """
    Reembolsa una transacción completed. La transacción pasa a refunded
    de inmediato; el refund se liquida después.
    """
    payload = payload or RefundCreate()
    try:
        result = engine.refunds.request_refund(
            transaction_id,
            amount=payload.amount,
            reason=payload.reason,
        )
    except CheckoutError as e:
        raise to_http_exception(e)

    return RefundResponse(
        refund=RefundOut.model_validate(result.refund),
        transaction=TransactionStatusResponse.from_transaction(
            result.transaction, engine.settings.settlement_delay_seconds
        ),
    )


@router.get(
    "/refunds/{refund_id}",
    response_model=RefundOut,
)
async def get_refund(
    refund_id: str,
    engine: CheckoutEngine = Depends(get_checkout_engine),
):
    try:
        refund = engine.refunds.get_refund(refund_id)
    except CheckoutError as e:
        raise to_http_exception(e)
    return RefundOut.model_validate(refund)


__all__ = ["router"]

# Fin del archivo backend/app/modules/checkout/routes/refunds.py
