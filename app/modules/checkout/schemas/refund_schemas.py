# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/schemas/refund_schemas.py

Schemas de reembolsos.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .payment_schemas import TransactionStatusResponse


class RefundCreate(BaseModel):
    """Solicitud de reembolso; sin amount se reembolsa el total."""

    amount: Optional[Decimal] = Field(default=None, description="Monto a reembolsar (> 0).")
    reason: Optional[str] = Field(default=None, max_length=500)


class RefundOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    transaction_id: str
    amount: Decimal
    currency: str
    reason: str
    status: str
    created_at: datetime
    completed_at: Optional[datetime] = None


class RefundResponse(BaseModel):
    success: bool = True
    message: str = "Refund initiated"
    refund: RefundOut
    transaction: TransactionStatusResponse


__all__ = ["RefundCreate", "RefundOut", "RefundResponse"]

# Fin del archivo backend/app/modules/checkout/schemas/refund_schemas.py
