# -*- coding: utf-8 -*-
"""
backend/tests/modules/checkout/test_payment_service.py

Tests del procesador de pagos.

Cubre:
- Envío de pago: transacción processing, sesión reclamada, liquidación programada
- Orden de validación (NotFound, Expired, InvalidState, InvalidInput)
- Redacción de datos del instrumento
- Una sola transacción por sesión bajo envíos concurrentes
- Liquidación idempotente, rechazos y errores del gateway
- Liquidación tardía con la sesión ya vencida

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict
from decimal import Decimal

import pytest

from app.modules.checkout.adapters import (
    DECLINED_BY_ISSUER,
    FixedOutcomeSettlementGateway,
    SettlementGateway,
)
from app.modules.checkout.dependencies import build_checkout_engine
from app.modules.checkout.enums import PaymentMethod, SessionStatus, TransactionStatus
from app.modules.checkout.errors import (
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    SessionExpiredError,
)
from app.modules.checkout.metrics import registry
from app.modules.checkout.services import (
    GATEWAY_ERROR_REASON,
    redact_payment_details,
    settlement_job_id,
    transition_transaction,
)

CARD = {"card_number": "4242 4242 4242 4242", "brand": "visa", "cvv": "123", "expiry": "12/30"}


class ExplodingGateway(SettlementGateway):
    name = "exploding"

    def settle(self, transaction):
        raise RuntimeError("connection reset by peer")


def _settlements(outcome: str) -> float:
    return registry.get_sample_value("checkout_settlements_total", {"outcome": outcome}) or 0.0


# =============================================================================
# Envío de pago
# =============================================================================

def test_submit_payment_creates_processing_transaction(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)

    submission = engine.payments.submit_payment(session.id, "credit_card", CARD)
    tx = submission.transaction

    assert tx.status is TransactionStatus.PROCESSING
    assert tx.amount == Decimal("107.18")
    assert tx.amount == session.pricing.total
    assert tx.session_id == session.id
    assert tx.user_id == "user-1"
    assert tx.payment_method is PaymentMethod.CREDIT_CARD

    stored = engine.sessions.get_session(session.id)
    assert stored.status is SessionStatus.PROCESSING
    assert stored.transaction_id == tx.id
    assert stored.payment_method is PaymentMethod.CREDIT_CARD
    assert submission.session.status is SessionStatus.PROCESSING

    assert engine.queue.is_pending(settlement_job_id(tx.id))


def test_payment_details_are_redacted(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)

    tx = engine.payments.submit_payment(session.id, "credit_card", CARD).transaction
    stored = engine.payments.get_transaction_status(tx.id)

    assert stored.payment_details.last4 == "4242"
    assert stored.payment_details.brand == "visa"
    dumped = repr(asdict(stored))
    assert "4242 4242 4242 4242" not in dumped
    assert "4242424242424242" not in dumped
    assert "123" not in repr(asdict(stored.payment_details))


def test_redaction_without_card_number():
    details = redact_payment_details(PaymentMethod.PAYPAL, None)

    assert details.type is PaymentMethod.PAYPAL
    assert details.last4 is None
    assert details.brand is None


def test_billing_address_falls_back_to_session(engine, headphones_cart):
    billing = {"line1": "1 Infinite Loop", "city": "Cupertino"}
    session = engine.sessions.create_session("user-1", headphones_cart, billing_address=billing)

    tx = engine.payments.submit_payment(session.id, "paypal").transaction

    assert tx.billing_address == billing


def test_billing_address_override(engine, headphones_cart):
    session = engine.sessions.create_session(
        "user-1", headphones_cart, billing_address={"city": "Old"}
    )

    tx = engine.payments.submit_payment(session.id, "paypal", billing_address={"city": "New"}).transaction

    assert tx.billing_address == {"city": "New"}
    assert engine.sessions.get_session(session.id).billing_address == {"city": "New"}


def test_submit_unknown_session(engine):
    with pytest.raises(NotFoundError):
        engine.payments.submit_payment("missing", "credit_card")


def test_second_submit_is_rejected(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    engine.payments.submit_payment(session.id, "credit_card", CARD)

    with pytest.raises(InvalidStateError):
        engine.payments.submit_payment(session.id, "credit_card", CARD)

    assert engine.payments.count_transactions() == 1


def test_unsupported_method_leaves_session_untouched(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)

    with pytest.raises(InvalidInputError):
        engine.payments.submit_payment(session.id, "bitcoin")

    assert engine.sessions.get_session(session.id).status is SessionStatus.INITIALIZED
    assert engine.payments.count_transactions() == 0
    assert engine.queue.pending_count() == 0


def test_expired_session_rejected(engine, clock, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    clock.advance(minutes=31)

    with pytest.raises(SessionExpiredError):
        engine.payments.submit_payment(session.id, "credit_card", CARD)

    assert engine.payments.count_transactions() == 0


def test_expiry_checked_before_payment_method(engine, clock, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    clock.advance(minutes=31)

    with pytest.raises(SessionExpiredError):
        engine.payments.submit_payment(session.id, "bitcoin")


def test_state_checked_before_payment_method(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    engine.payments.submit_payment(session.id, "credit_card", CARD)

    with pytest.raises(InvalidStateError):
        engine.payments.submit_payment(session.id, "bitcoin")


def test_concurrent_submits_yield_single_transaction(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    workers = 16
    barrier = threading.Barrier(workers)

    def attempt():
        barrier.wait()
        try:
            return engine.payments.submit_payment(session.id, "credit_card", CARD)
        except InvalidStateError as e:
            return e

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda _: attempt(), range(workers)))

    successes = [r for r in results if not isinstance(r, InvalidStateError)]
    rejections = [r for r in results if isinstance(r, InvalidStateError)]

    assert len(successes) == 1
    assert len(rejections) == workers - 1
    assert engine.payments.count_transactions() == 1
    assert engine.queue.pending_count() == 1
    assert engine.sessions.get_session(session.id).transaction_id == successes[0].transaction.id


# =============================================================================
# Liquidación
# =============================================================================

def test_settlement_completes_transaction_and_session(engine, clock, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    tx = engine.payments.submit_payment(session.id, "credit_card", CARD).transaction
    before = _settlements("completed")

    assert engine.queue.run(settlement_job_id(tx.id)) is True

    settled = engine.payments.get_transaction_status(tx.id)
    assert settled.status is TransactionStatus.COMPLETED
    assert settled.authorization_code.startswith("AUTH")
    assert settled.completed_at == clock.now
    assert settled.failure_reason is None
    assert engine.sessions.get_session(session.id).status is SessionStatus.COMPLETED
    assert _settlements("completed") == before + 1


def test_settlement_is_idempotent(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    tx = engine.payments.submit_payment(session.id, "credit_card", CARD).transaction

    first = engine.payments.settle_transaction(tx.id)
    second = engine.payments.settle_transaction(tx.id)

    assert first.status is TransactionStatus.COMPLETED
    assert second.status is TransactionStatus.COMPLETED
    assert second.version == first.version
    assert second.authorization_code == first.authorization_code

    # El trabajo programado sigue pendiente pero ya no cambia nada
    assert engine.queue.run(settlement_job_id(tx.id)) is True
    assert engine.payments.get_transaction_status(tx.id).version == first.version
    assert engine.queue.run(settlement_job_id(tx.id)) is False


def test_declined_settlement_marks_failed(checkout_settings, job_queue, clock, headphones_cart):
    engine = build_checkout_engine(
        checkout_settings,
        gateway=FixedOutcomeSettlementGateway(succeed=False),
        queue=job_queue,
        clock=clock,
    )
    session = engine.sessions.create_session("user-1", headphones_cart)
    tx = engine.payments.submit_payment(session.id, "debit_card", CARD).transaction

    engine.queue.drain()

    settled = engine.payments.get_transaction_status(tx.id)
    assert settled.status is TransactionStatus.FAILED
    assert settled.failure_reason == DECLINED_BY_ISSUER
    assert settled.authorization_code is None
    assert settled.completed_at is None
    assert engine.sessions.get_session(session.id).status is SessionStatus.FAILED


def test_gateway_error_marks_failed(checkout_settings, job_queue, clock, headphones_cart):
    engine = build_checkout_engine(
        checkout_settings, gateway=ExplodingGateway(), queue=job_queue, clock=clock
    )
    session = engine.sessions.create_session("user-1", headphones_cart)
    tx = engine.payments.submit_payment(session.id, "credit_card", CARD).transaction

    settled = engine.payments.settle_transaction(tx.id)

    assert settled.status is TransactionStatus.FAILED
    assert settled.failure_reason == GATEWAY_ERROR_REASON
    assert engine.sessions.get_session(session.id).status is SessionStatus.FAILED


def test_late_settlement_after_session_expiry(engine, clock, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    tx = engine.payments.submit_payment(session.id, "credit_card", CARD).transaction
    clock.advance(minutes=45)

    engine.queue.drain()

    assert engine.payments.get_transaction_status(tx.id).status is TransactionStatus.COMPLETED
    # Vista pública expirada; el registro conserva el resultado
    assert engine.sessions.get_session(session.id).status is SessionStatus.EXPIRED
    assert engine.sessions.session_repo.get(session.id).status is SessionStatus.COMPLETED


def test_sweep_does_not_touch_processing_sessions(engine, clock, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    engine.payments.submit_payment(session.id, "credit_card", CARD)
    clock.advance(minutes=45)

    assert engine.sessions.expire_stale_sessions() == 0
    assert engine.sessions.session_repo.get(session.id).status is SessionStatus.PROCESSING


def test_settle_unknown_transaction(engine):
    with pytest.raises(NotFoundError):
        engine.payments.settle_transaction("missing")


def test_get_unknown_transaction_status(engine):
    with pytest.raises(NotFoundError):
        engine.payments.get_transaction_status("missing")


def test_get_status_has_no_side_effects(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    tx = engine.payments.submit_payment(session.id, "credit_card", CARD).transaction

    for _ in range(3):
        polled = engine.payments.get_transaction_status(tx.id)
        assert polled.status is TransactionStatus.PROCESSING
        assert polled.version == tx.version


def test_illegal_transition_rejected(engine, headphones_cart):
    session = engine.sessions.create_session("user-1", headphones_cart)
    tx = engine.payments.submit_payment(session.id, "credit_card", CARD).transaction
    settled = engine.payments.settle_transaction(tx.id)

    with pytest.raises(InvalidStateError):
        transition_transaction(settled, TransactionStatus.FAILED)
    with pytest.raises(InvalidStateError):
        transition_transaction(settled, TransactionStatus.PROCESSING)

# Fin del archivo backend/tests/modules/checkout/test_payment_service.py
