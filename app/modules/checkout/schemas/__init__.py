# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/schemas/__init__.py

Contratos Pydantic v2 de la API de checkout.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .catalog_schemas import (
    PaymentMethodsResponse,
    ShippingQuoteRequest,
    ShippingQuoteResponse,
)
from .payment_schemas import (
    PaymentDetailsIn,
    SubmitPaymentRequest,
    SubmitPaymentResponse,
    TransactionStatusResponse,
)
from .refund_schemas import RefundCreate, RefundOut, RefundResponse
from .session_schemas import (
    CreateSessionRequest,
    CreateSessionResponse,
    LineItemIn,
    SessionOut,
)

__all__ = [
    "PaymentMethodsResponse",
    "ShippingQuoteRequest",
    "ShippingQuoteResponse",
    "PaymentDetailsIn",
    "SubmitPaymentRequest",
    "SubmitPaymentResponse",
    "TransactionStatusResponse",
    "RefundCreate",
    "RefundOut",
    "RefundResponse",
    "CreateSessionRequest",
    "CreateSessionResponse",
    "LineItemIn",
    "SessionOut",
]
