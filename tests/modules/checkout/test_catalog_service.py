# -*- coding: utf-8 -*-
"""
backend/tests/modules/checkout/test_catalog_service.py

Tests de métodos de pago y cotización de envío.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from decimal import Decimal

import pytest

from app.modules.checkout.enums import PaymentMethod, ShippingOption
from app.modules.checkout.errors import InvalidInputError
from app.modules.checkout.services import ShippingRates, list_payment_methods, quote_shipping
from app.shared.config.settings_checkout import CheckoutSettings


def _cart(price: str, quantity: int = 1):
    return [{"product_id": "sku-1", "name": "Item", "unit_price": price, "quantity": quantity}]


def _prices(quote) -> dict:
    return {option.id: option.price for option in quote.options}


def test_payment_methods_catalog():
    catalog = list_payment_methods()

    assert [m.id for m in catalog.methods] == list(PaymentMethod)
    assert catalog.default_method is PaymentMethod.CREDIT_CARD
    assert all(m.enabled for m in catalog.methods)

    fees = {m.id: m.fees for m in catalog.methods}
    assert fees[PaymentMethod.CREDIT_CARD].percentage == Decimal("2.9")
    assert fees[PaymentMethod.DEBIT_CARD].percentage == Decimal("1.9")
    assert fees[PaymentMethod.PAYPAL].percentage == Decimal("3.49")
    assert fees[PaymentMethod.PAYPAL].fixed == Decimal("0.49")


def test_quote_below_free_shipping_threshold():
    quote = quote_shipping(_cart("89.99"))

    assert _prices(quote) == {
        ShippingOption.STANDARD: Decimal("9.99"),
        ShippingOption.EXPEDITED: Decimal("19.99"),
        ShippingOption.OVERNIGHT: Decimal("29.99"),
    }
    assert quote.free_shipping_threshold == Decimal("100")
    assert quote.expedited_free_threshold == Decimal("200")


def test_quote_options_metadata():
    quote = quote_shipping(_cart("10.00"))
    by_id = {option.id: option for option in quote.options}

    assert by_id[ShippingOption.STANDARD].carrier == "USPS"
    assert by_id[ShippingOption.STANDARD].estimated_days == 7
    assert by_id[ShippingOption.EXPEDITED].carrier == "UPS"
    assert by_id[ShippingOption.EXPEDITED].estimated_days == 3
    assert by_id[ShippingOption.OVERNIGHT].carrier == "FedEx"
    assert by_id[ShippingOption.OVERNIGHT].estimated_days == 1


@pytest.mark.parametrize(
    "price, quantity, standard, expedited",
    [
        ("50.00", 2, Decimal("9.99"), Decimal("19.99")),     # 100 exacto: sin envío gratis
        ("75.00", 2, Decimal("0.00"), Decimal("19.99")),     # 150
        ("100.00", 2, Decimal("0.00"), Decimal("19.99")),    # 200 exacto
        ("125.00", 2, Decimal("0.00"), Decimal("9.99")),     # 250
        ("100.004", 1, Decimal("9.99"), Decimal("19.99")),   # redondea a 100.00
        ("200.005", 1, Decimal("0.00"), Decimal("19.99")),   # redondea a 200.00
    ],
)
def test_quote_thresholds(price, quantity, standard, expedited):
    prices = _prices(quote_shipping(_cart(price, quantity)))

    assert prices[ShippingOption.STANDARD] == standard
    assert prices[ShippingOption.EXPEDITED] == expedited
    assert prices[ShippingOption.OVERNIGHT] == Decimal("29.99")


def test_address_does_not_change_rates():
    address = {"country": "CA", "postal_code": "H2X 1Y4"}

    assert _prices(quote_shipping(_cart("30.00"), address)) == _prices(quote_shipping(_cart("30.00")))


def test_rates_from_settings():
    settings = CheckoutSettings(
        _env_file=None,
        free_shipping_threshold=Decimal("20"),
        flat_shipping_fee=Decimal("4.50"),
        overnight_shipping_fee=Decimal("15.00"),
    )
    rates = ShippingRates.from_settings(settings)

    low = _prices(quote_shipping(_cart("10.00"), rates=rates))
    high = _prices(quote_shipping(_cart("30.00"), rates=rates))

    assert low[ShippingOption.STANDARD] == Decimal("4.50")
    assert low[ShippingOption.OVERNIGHT] == Decimal("15.00")
    assert high[ShippingOption.STANDARD] == Decimal("0.00")


@pytest.mark.parametrize("items", [[], None, _cart("0")])
def test_quote_rejects_invalid_cart(items):
    with pytest.raises(InvalidInputError):
        quote_shipping(items)

# Fin del archivo backend/tests/modules/checkout/test_catalog_service.py
