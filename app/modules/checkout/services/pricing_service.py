# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/services/pricing_service.py

Calculadora de precios (pura, sin estado).

Reglas:
- subtotal = Σ unit_price × quantity
- tax      = subtotal × tax_rate
- shipping = 0 si subtotal > free_shipping_threshold, si no flat_shipping_fee
- cada componente se redondea (ROUND_HALF_EVEN) a la unidad mínima
  de la moneda y total es la suma de los componentes ya redondeados.

Ejemplo con reglas por omisión: subtotal 89.99 -> tax 7.20,
shipping 9.99, total 107.18.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Sequence

from app.modules.checkout.enums import Currency
from app.modules.checkout.errors import InvalidInputError
from app.modules.checkout.models import LineItem, Pricing
from app.modules.checkout.utils import quantize, to_decimal


@dataclass(frozen=True)
class PricingRules:
    tax_rate: Decimal = Decimal("0.08")
    free_shipping_threshold: Decimal = Decimal("100")
    flat_shipping_fee: Decimal = Decimal("9.99")

    @classmethod
    def from_settings(cls, settings: Any) -> "PricingRules":
        return cls(
            tax_rate=Decimal(settings.tax_rate),
            free_shipping_threshold=Decimal(settings.free_shipping_threshold),
            flat_shipping_fee=Decimal(settings.flat_shipping_fee),
        )


def build_line_item(raw: LineItem | Mapping[str, Any]) -> LineItem:
    """
    Normaliza un renglón (LineItem o dict) validando precio y cantidad.

    Raises:
        InvalidInputError: precio <= 0, cantidad no entera o <= 0
    """
    if isinstance(raw, LineItem):
        product_id, name, unit_price, quantity = raw.product_id, raw.name, raw.unit_price, raw.quantity
    elif isinstance(raw, Mapping):
        product_id = raw.get("product_id") or raw.get("productId") or raw.get("id")
        name = raw.get("name") or ""
        unit_price = raw.get("unit_price", raw.get("price"))
        quantity = raw.get("quantity")
    else:
        raise InvalidInputError("line item must be an object")

    if not product_id:
        raise InvalidInputError("line item product_id is required")
    if unit_price is None:
        raise InvalidInputError(f"line item {product_id}: unit_price is required")

    price = to_decimal(unit_price, field="unit_price")
    if price <= 0:
        raise InvalidInputError(f"line item {product_id}: unit_price must be > 0")
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidInputError(f"line item {product_id}: quantity must be an integer")
    if quantity <= 0:
        raise InvalidInputError(f"line item {product_id}: quantity must be > 0")

    return LineItem(product_id=str(product_id), name=str(name), unit_price=price, quantity=quantity)


def build_line_items(raw_items: Iterable[LineItem | Mapping[str, Any]] | None) -> tuple[LineItem, ...]:
    if raw_items is None:
        raise InvalidInputError("items are required")
    items = tuple(build_line_item(raw) for raw in raw_items)
    if not items:
        raise InvalidInputError("items must not be empty")
    return items


def compute_subtotal(items: Sequence[LineItem]) -> Decimal:
    return sum((item.line_subtotal for item in items), Decimal("0"))


def compute_pricing(
    items: Sequence[LineItem | Mapping[str, Any]],
    rules: PricingRules | None = None,
    currency: Currency = Currency.USD,
) -> Pricing:
    """
    Calcula el desglose de precio de un carrito.

    Determinista: mismos items y reglas producen el mismo resultado.

    Raises:
        InvalidInputError: items vacíos o con precio/cantidad inválidos
    """
    rules = rules or PricingRules()
    line_items = build_line_items(items)

    raw_subtotal = compute_subtotal(line_items)
    subtotal = quantize(raw_subtotal, currency)
    tax = quantize(raw_subtotal * rules.tax_rate, currency)
    # Umbral sobre el subtotal reportado
    if subtotal > rules.free_shipping_threshold:
        shipping = quantize(Decimal("0"), currency)
    else:
        shipping = quantize(rules.flat_shipping_fee, currency)

    return Pricing(
        subtotal=subtotal,
        tax=tax,
        shipping=shipping,
        total=subtotal + tax + shipping,
        currency=currency,
    )


__all__ = [
    "PricingRules",
    "build_line_item",
    "build_line_items",
    "compute_subtotal",
    "compute_pricing",
]

# Fin del archivo backend/app/modules/checkout/services/pricing_service.py
