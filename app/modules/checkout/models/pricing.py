# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/models/pricing.py

Desglose de precio de una sesión. Todos los componentes ya vienen
cuantizados a la unidad mínima de la moneda y total == subtotal + tax + shipping.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.modules.checkout.enums import Currency


@dataclass(frozen=True)
class Pricing:
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
    currency: Currency = Currency.USD


__all__ = ["Pricing"]

# Fin del archivo backend/app/modules/checkout/models/pricing.py
