# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/models/__init__.py

Registros en memoria del motor de checkout.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .checkout_session import CheckoutSession
from .line_item import LineItem
from .payment_transaction import PaymentTransaction, RedactedPaymentDetails
from .pricing import Pricing
from .refund import Refund

__all__ = [
    "CheckoutSession",
    "LineItem",
    "PaymentTransaction",
    "Pricing",
    "RedactedPaymentDetails",
    "Refund",
]

# Fin del archivo backend/app/modules/checkout/models/__init__.py
