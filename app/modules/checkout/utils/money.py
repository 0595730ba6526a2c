# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/utils/money.py

Aritmética monetaria con Decimal.

Redondeo bancario (ROUND_HALF_EVEN) a la unidad mínima de la moneda.
Nunca se usa float para montos.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

from app.modules.checkout.enums import Currency
from app.modules.checkout.errors import InvalidInputError


def to_decimal(value: object, field: str = "amount") -> Decimal:
    """
    Convierte value a Decimal sin pasar por float binario.

    Raises:
        InvalidInputError: si no es un número finito
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation as e:
            raise InvalidInputError(f"{field} must be a number") from e
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        raise InvalidInputError(f"{field} must be a number")
    if not result.is_finite():
        raise InvalidInputError(f"{field} must be a finite number")
    return result


def quantize(amount: Decimal, currency: Currency = Currency.USD) -> Decimal:
    """Redondea a la unidad mínima de la moneda con ROUND_HALF_EVEN."""
    return amount.quantize(currency.quantum, rounding=ROUND_HALF_EVEN)


def to_money(value: object, currency: Currency = Currency.USD, field: str = "amount") -> Decimal:
    """
    Convierte value a un monto exacto en la unidad mínima de la moneda.

    A diferencia de quantize, no redondea: 10.005 USD se rechaza.

    Raises:
        InvalidInputError: si no es número o tiene más decimales que la moneda
    """
    amount = to_decimal(value, field=field)
    try:
        exact = quantize(amount, currency)
    except InvalidOperation as e:
        raise InvalidInputError(f"{field} is out of range") from e
    if amount != exact:
        raise InvalidInputError(
            f"{field} has more than {currency.minor_units} decimal places for {currency}"
        )
    return exact


__all__ = ["to_decimal", "to_money", "quantize"]
# Fin del archivo backend/app/modules/checkout/utils/money.py
