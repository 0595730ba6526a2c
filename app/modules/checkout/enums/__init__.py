# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/__init__.py

Superficie de exportación de enums del módulo Checkout.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .currency_enum import Currency
from .payment_method_enum import PaymentMethod
from .refund_status_enum import RefundStatus
from .session_status_enum import SESSION_TRANSITIONS, SessionStatus
from .shipping_option_enum import ShippingOption
from .transaction_status_enum import (
    FINAL_TRANSACTION_STATUSES,
    TRANSACTION_TRANSITIONS,
    TransactionStatus,
)

__all__ = [
    "Currency",
    "PaymentMethod",
    "RefundStatus",
    "SessionStatus",
    "SESSION_TRANSITIONS",
    "ShippingOption",
    "TransactionStatus",
    "TRANSACTION_TRANSITIONS",
    "FINAL_TRANSACTION_STATUSES",
]

# Fin del archivo backend/app/modules/checkout/enums/__init__.py
