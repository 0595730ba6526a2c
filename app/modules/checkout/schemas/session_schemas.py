# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/schemas/session_schemas.py

Schemas de sesión de checkout (creación y lectura).

Los montos se serializan como strings decimales ("107.18") para no
perder precisión en JSON.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LineItemIn(BaseModel):
    """Renglón del carrito recibido del servicio de carrito."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    product_id: str = Field(
        ...,
        validation_alias=AliasChoices("product_id", "productId", "id"),
        description="Identificador del producto.",
    )
    name: str = Field(default="", description="Nombre visible del producto.")
    unit_price: Decimal = Field(
        ...,
        validation_alias=AliasChoices("unit_price", "unitPrice", "price"),
        description="Precio unitario (debe ser > 0).",
    )
    quantity: int = Field(..., description="Cantidad (entero > 0).")

    def to_domain(self) -> dict[str, Any]:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "unit_price": self.unit_price,
            "quantity": self.quantity,
        }


class CreateSessionRequest(BaseModel):
    """Solicitud para abrir una sesión de checkout."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(
        ...,
        validation_alias=AliasChoices("user_id", "userId"),
        description="Identificador opaco del usuario (lo provee identidad).",
    )
    items: list[LineItemIn] = Field(..., description="Snapshot del carrito.")
    currency: Optional[str] = Field(default=None, description="Moneda ISO 4217 (USD por omisión).")
    shipping_address: Optional[dict[str, Any]] = Field(
        default=None,
        validation_alias=AliasChoices("shipping_address", "shippingAddress"),
    )
    billing_address: Optional[dict[str, Any]] = Field(
        default=None,
        validation_alias=AliasChoices("billing_address", "billingAddress"),
    )


class LineItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: str
    name: str
    unit_price: Decimal
    quantity: int
    line_subtotal: Decimal


class PricingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
    currency: str


class SessionOut(BaseModel):
    """Vista pública de la sesión (el estado ya refleja la expiración)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    items: list[LineItemOut]
    pricing: PricingOut
    status: str
    created_at: datetime
    expires_at: datetime
    updated_at: datetime
    shipping_address: Optional[dict[str, Any]] = None
    billing_address: Optional[dict[str, Any]] = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None


class CreateSessionResponse(BaseModel):
    success: bool = True
    message: str = "Checkout session created"
    session: SessionOut


__all__ = [
    "LineItemIn",
    "CreateSessionRequest",
    "LineItemOut",
    "PricingOut",
    "SessionOut",
    "CreateSessionResponse",
]

# Fin del archivo backend/app/modules/checkout/schemas/session_schemas.py
