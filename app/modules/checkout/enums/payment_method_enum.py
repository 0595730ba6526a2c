# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/payment_method_enum.py

Enum de métodos de pago aceptados en checkout.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from enum import StrEnum


class PaymentMethod(StrEnum):
    """Método de pago elegido por el cliente."""

    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PAYPAL = "paypal"
    APPLE_PAY = "apple_pay"
    GOOGLE_PAY = "google_pay"

    @classmethod
    def parse(cls, value: object) -> "PaymentMethod | None":
        """Devuelve el miembro correspondiente o None si no es un método soportado."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


__all__ = ["PaymentMethod"]

# Fin del archivo backend/app/modules/checkout/enums/payment_method_enum.py
