# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/models/line_item.py

Renglón del carrito tal como llega del servicio de carrito (snapshot confiable).

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LineItem:
    product_id: str
    name: str
    unit_price: Decimal
    quantity: int

    @property
    def line_subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


__all__ = ["LineItem"]

# Fin del archivo backend/app/modules/checkout/models/line_item.py
