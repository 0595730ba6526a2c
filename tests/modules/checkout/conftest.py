# -*- coding: utf-8 -*-
"""
backend/tests/modules/checkout/conftest.py

Fixtures del módulo Checkout:
- Reloj controlable (avanzar el tiempo sin dormir)
- Motor aislado con gateway determinista y cola sin temporizadores
- Carritos de ejemplo

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.modules.checkout.dependencies import build_checkout_engine, reset_checkout_engine
from app.modules.checkout.tasks import DeferredTaskQueue
from app.shared.config.settings_checkout import CheckoutSettings
from app.shared.utils.async_job_registry import AsyncJobRegistry


class FakeClock:
    """Reloj UTC manual para pruebas de expiración."""

    def __init__(self, start: datetime = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def checkout_settings() -> CheckoutSettings:
    return CheckoutSettings(_env_file=None, settlement_gateway="always_succeed")


@pytest.fixture
def job_queue() -> DeferredTaskQueue:
    """Cola sin temporizadores: las pruebas fuerzan la liquidación."""
    return DeferredTaskQueue(registry=AsyncJobRegistry(), autostart=False)


@pytest.fixture
def engine(checkout_settings, job_queue, clock):
    """Motor aislado, inyectado también como motor global de la app."""
    checkout_engine = build_checkout_engine(checkout_settings, queue=job_queue, clock=clock)
    reset_checkout_engine(checkout_engine)
    return checkout_engine


@pytest.fixture
def headphones_cart() -> list[dict]:
    """Carrito de 89.99 -> tax 7.20, shipping 9.99, total 107.18."""
    return [
        {"product_id": "sku-headphones", "name": "Wireless Headphones", "unit_price": "89.99", "quantity": 1},
    ]


@pytest.fixture
def large_cart() -> list[dict]:
    """Carrito sobre el umbral de envío gratis (subtotal 150.00)."""
    return [
        {"product_id": "sku-keyboard", "name": "Mechanical Keyboard", "unit_price": "75.00", "quantity": 2},
    ]

# Fin del archivo backend/tests/modules/checkout/conftest.py
