# -*- coding: utf-8 -*-
"""
backend/tests/modules/checkout/test_session_service.py

Tests del gestor de sesiones de checkout.

Cubre:
- Creación (estado inicial, expiración, precio congelado)
- Validación de usuario y moneda
- Expiración perezosa al leer y barrido periódico
- Lecturas como copias independientes

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from app.modules.checkout.enums import Currency, SessionStatus
from app.modules.checkout.errors import InvalidInputError, NotFoundError
from app.modules.checkout.metrics import registry
from app.modules.checkout.repositories import SessionRepository
from app.modules.checkout.services import SessionService


@pytest.fixture
def session_repo():
    return SessionRepository()


@pytest.fixture
def service(session_repo, clock):
    return SessionService(session_repo, clock=clock)


def _expired_total() -> float:
    return registry.get_sample_value("checkout_sessions_expired_total") or 0.0


def test_create_session_initial_state(service, clock, headphones_cart):
    session = service.create_session("user-1", headphones_cart)

    assert session.status is SessionStatus.INITIALIZED
    assert session.user_id == "user-1"
    assert session.created_at == clock.now
    assert session.expires_at == clock.now + timedelta(minutes=30)
    assert session.pricing.total == Decimal("107.18")
    assert session.payment_method is None
    assert session.transaction_id is None
    assert session.version == 1
    assert len(session.items) == 1


def test_create_session_assigns_unique_ids(service, headphones_cart):
    first = service.create_session("user-1", headphones_cart)
    second = service.create_session("user-1", headphones_cart)

    assert first.id != second.id
    assert service.count_sessions() == 2


def test_create_session_keeps_addresses(service, headphones_cart):
    address = {"line1": "123 Main St", "city": "Austin", "country": "US"}
    session = service.create_session(
        "user-1", headphones_cart, shipping_address=address, billing_address=address
    )

    assert session.shipping_address == address
    assert session.billing_address == address


def test_create_session_normalizes_currency(service, headphones_cart):
    session = service.create_session("user-1", headphones_cart, currency="eur")

    assert session.pricing.currency is Currency.EUR


@pytest.mark.parametrize("currency", ["XYZ", "usd-ish", 42])
def test_create_session_rejects_unknown_currency(service, headphones_cart, currency):
    with pytest.raises(InvalidInputError):
        service.create_session("user-1", headphones_cart, currency=currency)


@pytest.mark.parametrize("user_id", ["", "   ", None])
def test_create_session_requires_user(service, headphones_cart, user_id):
    with pytest.raises(InvalidInputError):
        service.create_session(user_id, headphones_cart)


def test_create_session_rejects_empty_cart(service, session_repo):
    with pytest.raises(InvalidInputError):
        service.create_session("user-1", [])

    assert session_repo.count() == 0


def test_get_unknown_session_raises_not_found(service):
    with pytest.raises(NotFoundError) as exc:
        service.get_session("missing")

    assert exc.value.resource == "session"
    assert "missing" in exc.value.message


def test_session_is_live_exactly_at_expiry(service, clock, headphones_cart):
    session = service.create_session("user-1", headphones_cart)
    clock.advance(minutes=30)

    assert service.get_session(session.id).status is SessionStatus.INITIALIZED


def test_lazy_expiry_on_read_persists_status(service, session_repo, clock, headphones_cart):
    session = service.create_session("user-1", headphones_cart)
    before = _expired_total()
    clock.advance(minutes=30, seconds=1)

    viewed = service.get_session(session.id)

    assert viewed.status is SessionStatus.EXPIRED
    assert session_repo.get(session.id).status is SessionStatus.EXPIRED
    assert _expired_total() == before + 1

    # Una segunda lectura no vuelve a contar la expiración
    service.get_session(session.id)
    assert _expired_total() == before + 1


def test_get_session_returns_independent_copy(service, headphones_cart):
    session = service.create_session("user-1", headphones_cart)

    copy_a = service.get_session(session.id)
    copy_a.status = SessionStatus.COMPLETED

    assert service.get_session(session.id).status is SessionStatus.INITIALIZED


def test_sweep_expires_only_stale_sessions(service, clock, headphones_cart):
    old = [service.create_session("user-1", headphones_cart) for _ in range(3)]
    clock.advance(minutes=20)
    fresh = service.create_session("user-2", headphones_cart)
    clock.advance(minutes=11)

    assert service.expire_stale_sessions() == 3
    assert service.expire_stale_sessions() == 0

    for session in old:
        assert service.session_repo.get(session.id).status is SessionStatus.EXPIRED
    assert service.get_session(fresh.id).status is SessionStatus.INITIALIZED


def test_custom_ttl(session_repo, clock, headphones_cart):
    service = SessionService(session_repo, ttl=timedelta(minutes=5), clock=clock)
    session = service.create_session("user-1", headphones_cart)

    clock.advance(minutes=6)

    assert service.get_session(session.id).status is SessionStatus.EXPIRED


def test_non_positive_ttl_rejected(session_repo):
    with pytest.raises(ValueError):
        SessionService(session_repo, ttl=timedelta(0))

# Fin del archivo backend/tests/modules/checkout/test_session_service.py
