# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/services/__init__.py

Servicios de negocio del motor de checkout.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .catalog_service import (
    PaymentMethodCatalog,
    ShippingQuote,
    ShippingRates,
    list_payment_methods,
    quote_shipping,
)
from .payment_service import (
    GATEWAY_ERROR_REASON,
    PaymentService,
    PaymentSubmission,
    redact_payment_details,
    settlement_job_id,
    transition_transaction,
)
from .pricing_service import PricingRules, compute_pricing
from .refund_service import RefundResult, RefundService, refund_job_id
from .session_service import SessionService

__all__ = [
    "PaymentMethodCatalog",
    "ShippingQuote",
    "ShippingRates",
    "list_payment_methods",
    "quote_shipping",
    "GATEWAY_ERROR_REASON",
    "PaymentService",
    "PaymentSubmission",
    "redact_payment_details",
    "settlement_job_id",
    "transition_transaction",
    "PricingRules",
    "compute_pricing",
    "RefundResult",
    "RefundService",
    "refund_job_id",
    "SessionService",
]
