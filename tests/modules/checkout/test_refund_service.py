# -*- coding: utf-8 -*-
"""
backend/tests/modules/checkout/test_refund_service.py

Tests del procesador de reembolsos.

Cubre:
- Reembolso total (por omisión) y parcial
- Transacción refunded de inmediato; refund liquidado después
- Rechazos por estado y por monto
- Liquidación idempotente del refund

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from decimal import Decimal

import pytest

from app.modules.checkout.enums import RefundStatus, TransactionStatus
from app.modules.checkout.errors import InvalidInputError, InvalidStateError, NotFoundError
from app.modules.checkout.services import refund_job_id


@pytest.fixture
def completed_tx(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    tx = engine.payments.submit_payment(session.id, "credit_card").transaction
    return engine.payments.settle_transaction(tx.id)


@pytest.fixture
def processing_tx(engine, headphones_cart):
    session = engine.sessions.create_session("user-2", headphones_cart)
    return engine.payments.submit_payment(session.id, "credit_card").transaction


def test_full_refund_by_default(engine, clock, completed_tx):
    result = engine.refunds.request_refund(completed_tx.id)

    refund = result.refund
    assert refund.status is RefundStatus.PROCESSING
    assert refund.amount == Decimal("107.18")
    assert refund.currency is completed_tx.currency
    assert refund.reason == "Customer request"
    assert refund.created_at == clock.now
    assert refund.completed_at is None

    tx = engine.payments.get_transaction_status(completed_tx.id)
    assert tx.status is TransactionStatus.REFUNDED
    assert tx.refund_id == refund.id
    assert tx.refund_amount == Decimal("107.18")
    assert result.transaction.status is TransactionStatus.REFUNDED

    assert engine.queue.is_pending(refund_job_id(refund.id))


def test_partial_refund(engine, completed_tx):
    refund = engine.refunds.request_refund(completed_tx.id, amount="50.00", reason="Damaged box").refund

    assert refund.amount == Decimal("50.00")
    assert refund.reason == "Damaged box"
    assert engine.payments.get_transaction_status(completed_tx.id).refund_amount == Decimal("50.00")


@pytest.mark.parametrize("amount", ["107.185", "10.005", Decimal("0.001")])
def test_refund_rejects_sub_cent_amounts(engine, completed_tx, amount):
    # 107.185 redondearía a 107.18 (el total); nunca se acepta por redondeo
    with pytest.raises(InvalidInputError):
        engine.refunds.request_refund(completed_tx.id, amount=amount)

    tx = engine.payments.get_transaction_status(completed_tx.id)
    assert tx.status is TransactionStatus.COMPLETED
    assert tx.refund_id is None


def test_refund_accepts_trailing_zeros(engine, completed_tx):
    refund = engine.refunds.request_refund(completed_tx.id, amount="10.500").refund

    assert refund.amount == Decimal("10.50")


def test_blank_reason_uses_default(engine, completed_tx):
    refund = engine.refunds.request_refund(completed_tx.id, reason="   ").refund

    assert refund.reason == "Customer request"


def test_refund_settles_later(engine, clock, completed_tx):
    refund = engine.refunds.request_refund(completed_tx.id).refund
    clock.advance(seconds=1)

    assert engine.queue.run(refund_job_id(refund.id)) is True

    settled = engine.refunds.get_refund(refund.id)
    assert settled.status is RefundStatus.COMPLETED
    assert settled.completed_at == clock.now
    # La transacción ya estaba refunded; la liquidación no la toca
    assert engine.payments.get_transaction_status(completed_tx.id).status is TransactionStatus.REFUNDED


def test_settle_refund_is_idempotent(engine, completed_tx):
    refund = engine.refunds.request_refund(completed_tx.id).refund

    first = engine.refunds.settle_refund(refund.id)
    second = engine.refunds.settle_refund(refund.id)

    assert first.status is RefundStatus.COMPLETED
    assert second.version == first.version
    assert second.completed_at == first.completed_at


def test_second_refund_rejected(engine, completed_tx):
    engine.refunds.request_refund(completed_tx.id, amount="10.00")

    with pytest.raises(InvalidStateError):
        engine.refunds.request_refund(completed_tx.id, amount="10.00")


def test_processing_transaction_cannot_be_refunded(engine, processing_tx):
    with pytest.raises(InvalidStateError):
        engine.refunds.request_refund(processing_tx.id)

    assert engine.payments.get_transaction_status(processing_tx.id).status is TransactionStatus.PROCESSING


def test_state_checked_before_amount(engine, processing_tx):
    with pytest.raises(InvalidStateError):
        engine.refunds.request_refund(processing_tx.id, amount="0")


def test_failed_transaction_cannot_be_refunded(engine, processing_tx):
    engine.payments.gateway.succeed = False
    engine.payments.settle_transaction(processing_tx.id)

    with pytest.raises(InvalidStateError):
        engine.refunds.request_refund(processing_tx.id)


@pytest.mark.parametrize("amount", ["0", "-1.00", "107.19", "500", "abc"])
def test_invalid_amount_rejected(engine, completed_tx, amount):
    with pytest.raises(InvalidInputError):
        engine.refunds.request_refund(completed_tx.id, amount=amount)

    # Nada cambió
    tx = engine.payments.get_transaction_status(completed_tx.id)
    assert tx.status is TransactionStatus.COMPLETED
    assert tx.refund_id is None


def test_refund_of_exact_amount_allowed(engine, completed_tx):
    refund = engine.refunds.request_refund(completed_tx.id, amount="107.18").refund

    assert refund.amount == completed_tx.amount


def test_unknown_transaction(engine):
    with pytest.raises(NotFoundError):
        engine.refunds.request_refund("missing")


def test_unknown_refund(engine):
    with pytest.raises(NotFoundError):
        engine.refunds.get_refund("missing")
    with pytest.raises(NotFoundError):
        engine.refunds.settle_refund("missing")

# Fin del archivo backend/tests/modules/checkout/test_refund_service.py
