# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/routes/catalog.py

Rutas de consulta: métodos de pago y cotización de envío.

Endpoints:
- GET  /checkout/payment-methods
- POST /checkout/shipping

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.modules.checkout.dependencies import CheckoutEngine, get_checkout_engine
from app.modules.checkout.errors import CheckoutError
from app.modules.checkout.schemas import (
    PaymentMethodsResponse,
    ShippingQuoteRequest,
    ShippingQuoteResponse,
)
from app.modules.checkout.services import list_payment_methods, quote_shipping

from .errors import to_http_exception

router = APIRouter(tags=["checkout:catalog"])


@router.get("/payment-methods", response_model=PaymentMethodsResponse)
async def get_payment_methods():
    return PaymentMethodsResponse.model_validate(list_payment_methods())


@router.post("/shipping", response_model=ShippingQuoteResponse)
async def get_shipping_quote(
    payload: ShippingQuoteRequest,
    engine: CheckoutEngine = Depends(get_checkout_engine),
):
    try:
        quote = quote_shipping(
            [item.to_domain() for item in payload.items],
            payload.address,
            engine.shipping_rates,
        )
    except CheckoutError as e:
        raise to_http_exception(e)
    return ShippingQuoteResponse.model_validate(quote)


__all__ = ["router"]

# Fin del archivo backend/app/modules/checkout/routes/catalog.py
