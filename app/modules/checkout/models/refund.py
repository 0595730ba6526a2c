# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/models/refund.py

Registro de reembolso (a lo más uno por transacción).

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.modules.checkout.enums import Currency, RefundStatus


@dataclass
class Refund:
    id: str
    transaction_id: str
    amount: Decimal
    currency: Currency
    reason: str
    status: RefundStatus
    created_at: datetime
    completed_at: Optional[datetime] = None
    version: int = field(default=0)


__all__ = ["Refund"]

# Fin del archivo backend/app/modules/checkout/models/refund.py
