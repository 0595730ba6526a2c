# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/currency_enum.py

Enum de monedas operativas del motor de checkout.
No hay conversión entre monedas: la sesión fija la suya al crearse.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from decimal import Decimal
from enum import StrEnum


class Currency(StrEnum):
    """Moneda ISO 4217 soportada (códigos en mayúsculas)."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    MXN = "MXN"

    @property
    def minor_units(self) -> int:
        return _MINOR_UNITS.get(self, 2)

    @property
    def quantum(self) -> Decimal:
        """Unidad mínima de la moneda (0.01 para monedas con centavos)."""
        return Decimal(1).scaleb(-self.minor_units)

    @classmethod
    def parse(cls, value: object) -> "Currency | None":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


_MINOR_UNITS: dict[str, int] = {
    "USD": 2,
    "EUR": 2,
    "GBP": 2,
    "CAD": 2,
    "MXN": 2,
}


__all__ = ["Currency"]

# Fin del archivo backend/app/modules/checkout/enums/currency_enum.py
