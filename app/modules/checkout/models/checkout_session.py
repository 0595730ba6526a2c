# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/models/checkout_session.py

Registro de sesión de checkout.

Una sesión congela el carrito y su precio al momento de crearse y vive
hasta expires_at. Solo el procesador de pagos y la evaluación de
expiración la mutan; nunca se borra.

`version` es el contador de concurrencia optimista: el store lo
incrementa en cada escritura exitosa.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from app.modules.checkout.enums import PaymentMethod, SessionStatus

from .line_item import LineItem
from .pricing import Pricing


@dataclass
class CheckoutSession:
    id: str
    user_id: str
    items: tuple[LineItem, ...]
    pricing: Pricing
    status: SessionStatus
    created_at: datetime
    expires_at: datetime
    updated_at: datetime
    shipping_address: Optional[dict[str, Any]] = None
    billing_address: Optional[dict[str, Any]] = None
    payment_method: Optional[PaymentMethod] = None
    transaction_id: Optional[str] = None
    version: int = field(default=0)

    def is_past_expiry(self, now: datetime) -> bool:
        return now > self.expires_at


__all__ = ["CheckoutSession"]

# Fin del archivo backend/app/modules/checkout/models/checkout_session.py
