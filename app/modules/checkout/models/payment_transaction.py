# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/models/payment_transaction.py

Registro de transacción de pago (una por sesión).

El monto es una copia congelada de session.pricing.total al momento del
envío. Los datos del instrumento se guardan redactados: nunca el número
completo de tarjeta.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from app.modules.checkout.enums import Currency, PaymentMethod, TransactionStatus


@dataclass(frozen=True)
class RedactedPaymentDetails:
    type: PaymentMethod
    last4: Optional[str] = None
    brand: Optional[str] = None


@dataclass
class PaymentTransaction:
    id: str
    session_id: str
    user_id: str
    amount: Decimal
    currency: Currency
    payment_method: PaymentMethod
    payment_details: RedactedPaymentDetails
    status: TransactionStatus
    created_at: datetime
    updated_at: datetime
    billing_address: Optional[dict[str, Any]] = None
    completed_at: Optional[datetime] = None
    authorization_code: Optional[str] = None
    failure_reason: Optional[str] = None
    refund_id: Optional[str] = None
    refund_amount: Optional[Decimal] = None
    version: int = field(default=0)


__all__ = ["PaymentTransaction", "RedactedPaymentDetails"]

# Fin del archivo backend/app/modules/checkout/models/payment_transaction.py
