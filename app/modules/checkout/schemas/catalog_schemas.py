# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/schemas/catalog_schemas.py

Schemas de métodos de pago y cotización de envío.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .session_schemas import LineItemIn


class FeeScheduleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    percentage: Decimal
    fixed: Decimal


class PaymentMethodOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    enabled: bool
    fees: FeeScheduleOut


class PaymentMethodsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    payment_methods: list[PaymentMethodOut] = Field(..., validation_alias="methods")
    default_method: str


class ShippingQuoteRequest(BaseModel):
    items: list[LineItemIn]
    address: Optional[dict[str, Any]] = None


class ShippingOptionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    price: Decimal
    estimated_days: int
    carrier: str


class ShippingQuoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    shipping_options: list[ShippingOptionOut] = Field(..., validation_alias="options")
    free_shipping_threshold: Decimal
    expedited_free_threshold: Decimal


__all__ = [
    "FeeScheduleOut",
    "PaymentMethodOut",
    "PaymentMethodsResponse",
    "ShippingQuoteRequest",
    "ShippingOptionOut",
    "ShippingQuoteResponse",
]

# Fin del archivo backend/app/modules/checkout/schemas/catalog_schemas.py
