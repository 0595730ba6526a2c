# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/schemas/payment_schemas.py

Schemas de envío de pago y del endpoint de estado para polling.

Contrato de polling:
- is_final=False -> seguir consultando tras retry_after_seconds
- is_final=True  -> estado definitivo (completed/failed/cancelled/refunded)

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

import math
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.modules.checkout.models import PaymentTransaction

from .session_schemas import SessionOut


class PaymentDetailsIn(BaseModel):
    """
    Datos del instrumento. Solo se conservan últimos 4 dígitos y marca;
    cualquier otro campo (cvv, expiración) se ignora y nunca se guarda.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    card_number: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("card_number", "cardNumber"),
    )
    brand: Optional[str] = None

    def to_domain(self) -> dict[str, Any]:
        return {"card_number": self.card_number, "brand": self.brand}


class SubmitPaymentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., validation_alias=AliasChoices("session_id", "sessionId"))
    payment_method: str = Field(
        ...,
        validation_alias=AliasChoices("payment_method", "paymentMethod"),
        description="credit_card | debit_card | paypal | apple_pay | google_pay",
    )
    payment_details: Optional[PaymentDetailsIn] = Field(
        default=None,
        validation_alias=AliasChoices("payment_details", "paymentDetails"),
    )
    billing_address: Optional[dict[str, Any]] = Field(
        default=None,
        validation_alias=AliasChoices("billing_address", "billingAddress"),
    )


class SubmitPaymentResponse(BaseModel):
    success: bool = True
    message: str = "Payment processing initiated"
    transaction_id: str
    status: str
    session: SessionOut


class RedactedPaymentDetailsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    last4: Optional[str] = None
    brand: Optional[str] = None


class TransactionStatusResponse(BaseModel):
    """Resumen de la transacción para polling del cliente."""

    transaction_id: str = Field(..., description="ID de la transacción.")
    session_id: str
    status: str = Field(..., description="pending/processing/completed/failed/cancelled/refunded")
    amount: Decimal
    currency: str
    payment_method: str
    payment_details: RedactedPaymentDetailsOut
    created_at: datetime
    updated_at: datetime
    completed_at: Optional[datetime] = None
    authorization_code: Optional[str] = None
    failure_reason: Optional[str] = None
    refund_id: Optional[str] = None
    refund_amount: Optional[Decimal] = None
    is_final: bool = Field(..., description="True si el estado ya no cambia por sí solo.")
    retry_after_seconds: int = Field(
        default=2,
        ge=1,
        le=60,
        description="Segundos sugeridos para esperar antes del próximo poll.",
    )

    @classmethod
    def from_transaction(
        cls,
        transaction: PaymentTransaction,
        settlement_delay_seconds: float = 2.0,
    ) -> "TransactionStatusResponse":
        return cls(
            transaction_id=transaction.id,
            session_id=transaction.session_id,
            status=transaction.status.value,
            amount=transaction.amount,
            currency=transaction.currency.value,
            payment_method=transaction.payment_method.value,
            payment_details=RedactedPaymentDetailsOut.model_validate(transaction.payment_details),
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
            completed_at=transaction.completed_at,
            authorization_code=transaction.authorization_code,
            failure_reason=transaction.failure_reason,
            refund_id=transaction.refund_id,
            refund_amount=transaction.refund_amount,
            is_final=transaction.status.is_final,
            retry_after_seconds=min(60, max(1, math.ceil(settlement_delay_seconds))),
        )


__all__ = [
    "PaymentDetailsIn",
    "SubmitPaymentRequest",
    "SubmitPaymentResponse",
    "RedactedPaymentDetailsOut",
    "TransactionStatusResponse",
]

# Fin del archivo backend/app/modules/checkout/schemas/payment_schemas.py
