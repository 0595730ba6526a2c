# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/routes/payments.py

Rutas de pago y consulta de estado (polling).

Endpoints:
- POST /checkout/payment
- GET  /checkout/payment/{transaction_id}/status

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.modules.checkout.dependencies import CheckoutEngine, get_checkout_engine
from app.modules.checkout.errors import CheckoutError
from app.modules.checkout.schemas import (
    SessionOut,
    SubmitPaymentRequest,
    SubmitPaymentResponse,
    TransactionStatusResponse,
)

from .errors import to_http_exception

router = APIRouter(tags=["checkout:payments"])


@router.post(
    "/payment",
    response_model=SubmitPaymentResponse,
)
async def submit_payment(
    payload: SubmitPaymentRequest,
    engine: CheckoutEngine = Depends(get_checkout_engine),
):
    """
    Envía el pago de una sesión. Responde de inmediato con la transacción
    en processing; el resultado final se consulta por polling.
    """
    details = payload.payment_details.to_domain() if payload.payment_details else None
    try:
        submission = engine.payments.submit_payment(
            payload.session_id,
            payload.payment_method,
            details,
            payload.billing_address,
        )
    except CheckoutError as e:
        raise to_http_exception(e)

    return SubmitPaymentResponse(
        transaction_id=submission.transaction.id,
        status=submission.transaction.status.value,
        session=SessionOut.model_validate(submission.session),
    )


@router.get(
    "/payment/{transaction_id}/status",
    response_model=TransactionStatusResponse,
)
async def get_payment_status(
    transaction_id: str,
    engine: CheckoutEngine = Depends(get_checkout_engine),
):
    """
    Estado de la transacción. Sin efectos secundarios.
    """
    try:
        transaction = engine.payments.get_transaction_status(transaction_id)
    except CheckoutError as e:
        raise to_http_exception(e)
    return TransactionStatusResponse.from_transaction(
        transaction, engine.settings.settlement_delay_seconds
    )


__all__ = ["router"]

# Fin del archivo backend/app/modules/checkout/routes/payments.py
