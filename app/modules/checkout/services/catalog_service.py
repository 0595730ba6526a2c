# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/services/catalog_service.py

Consultas de referencia: métodos de pago con su esquema de comisiones
y cotización de opciones de envío.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from app.modules.checkout.enums import PaymentMethod, ShippingOption
from app.modules.checkout.models import LineItem
from app.modules.checkout.utils import quantize

from .pricing_service import build_line_items, compute_subtotal


@dataclass(frozen=True)
class FeeSchedule:
    percentage: Decimal
    fixed: Decimal


@dataclass(frozen=True)
class PaymentMethodInfo:
    id: PaymentMethod
    name: str
    description: str
    enabled: bool
    fees: FeeSchedule


@dataclass(frozen=True)
class PaymentMethodCatalog:
    methods: tuple[PaymentMethodInfo, ...]
    default_method: PaymentMethod


@dataclass(frozen=True)
class ShippingQuoteOption:
    id: ShippingOption
    name: str
    description: str
    price: Decimal
    estimated_days: int
    carrier: str


@dataclass(frozen=True)
class ShippingQuote:
    options: tuple[ShippingQuoteOption, ...]
    free_shipping_threshold: Decimal
    expedited_free_threshold: Decimal


@dataclass(frozen=True)
class ShippingRates:
    free_shipping_threshold: Decimal = Decimal("100")
    standard_fee: Decimal = Decimal("9.99")
    expedited_free_threshold: Decimal = Decimal("200")
    expedited_fee: Decimal = Decimal("19.99")
    expedited_discounted_fee: Decimal = Decimal("9.99")
    overnight_fee: Decimal = Decimal("29.99")

    @classmethod
    def from_settings(cls, settings: Any) -> "ShippingRates":
        return cls(
            free_shipping_threshold=Decimal(settings.free_shipping_threshold),
            standard_fee=Decimal(settings.flat_shipping_fee),
            expedited_free_threshold=Decimal(settings.expedited_free_threshold),
            expedited_fee=Decimal(settings.expedited_shipping_fee),
            expedited_discounted_fee=Decimal(settings.expedited_discounted_fee),
            overnight_fee=Decimal(settings.overnight_shipping_fee),
        )


_PAYMENT_METHODS: tuple[PaymentMethodInfo, ...] = (
    PaymentMethodInfo(
        PaymentMethod.CREDIT_CARD, "Credit Card", "Visa, MasterCard, American Express", True,
        FeeSchedule(Decimal("2.9"), Decimal("0.30")),
    ),
    PaymentMethodInfo(
        PaymentMethod.DEBIT_CARD, "Debit Card", "Bank debit cards", True,
        FeeSchedule(Decimal("1.9"), Decimal("0.30")),
    ),
    PaymentMethodInfo(
        PaymentMethod.PAYPAL, "PayPal", "Pay with your PayPal account", True,
        FeeSchedule(Decimal("3.49"), Decimal("0.49")),
    ),
    PaymentMethodInfo(
        PaymentMethod.APPLE_PAY, "Apple Pay", "Pay with Touch ID or Face ID", True,
        FeeSchedule(Decimal("2.9"), Decimal("0.30")),
    ),
    PaymentMethodInfo(
        PaymentMethod.GOOGLE_PAY, "Google Pay", "Pay with Google Pay", True,
        FeeSchedule(Decimal("2.9"), Decimal("0.30")),
    ),
)


def list_payment_methods() -> PaymentMethodCatalog:
    return PaymentMethodCatalog(methods=_PAYMENT_METHODS, default_method=PaymentMethod.CREDIT_CARD)


def quote_shipping(
    items: Iterable[LineItem | Mapping[str, Any]] | None,
    address: Optional[Mapping[str, Any]] = None,
    rates: Optional[ShippingRates] = None,
) -> ShippingQuote:
    """
    Cotiza las opciones de envío para un carrito.

    La dirección se acepta pero no altera tarifas (sin cálculo por zona).

    Raises:
        InvalidInputError: items vacíos o mal formados
    """
    rates = rates or ShippingRates()
    subtotal = quantize(compute_subtotal(build_line_items(items)))

    standard = Decimal("0.00") if subtotal > rates.free_shipping_threshold else rates.standard_fee
    expedited = (
        rates.expedited_discounted_fee
        if subtotal > rates.expedited_free_threshold
        else rates.expedited_fee
    )

    options = (
        ShippingQuoteOption(ShippingOption.STANDARD, "Standard Shipping", "5-7 business days", standard, 7, "USPS"),
        ShippingQuoteOption(ShippingOption.EXPEDITED, "Expedited Shipping", "2-3 business days", expedited, 3, "UPS"),
        ShippingQuoteOption(ShippingOption.OVERNIGHT, "Overnight Shipping", "Next business day", rates.overnight_fee, 1, "FedEx"),
    )
    return ShippingQuote(
        options=options,
        free_shipping_threshold=rates.free_shipping_threshold,
        expedited_free_threshold=rates.expedited_free_threshold,
    )


__all__ = [
    "FeeSchedule",
    "PaymentMethodInfo",
    "PaymentMethodCatalog",
    "ShippingQuoteOption",
    "ShippingQuote",
    "ShippingRates",
    "list_payment_methods",
    "quote_shipping",
]

# Fin del archivo backend/app/modules/checkout/services/catalog_service.py
