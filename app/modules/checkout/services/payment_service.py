# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/services/payment_service.py

Procesador de pagos: máquina de estados sesión/transacción.

Flujos cubiertos:
- submit_payment: valida la sesión y crea la transacción (una por sesión)
  dentro de una sola sección crítica por sesión; programa la liquidación
- settle_transaction: liquida una transacción processing a lo más una
  vez y refleja el resultado terminal en la sesión
- get_transaction_status: lectura sin efectos

La liquidación siempre escribe su resultado aunque la sesión haya
vencido mientras tanto: la finalidad de la transacción no depende de la
expiración de la sesión.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional

from app.modules.checkout.adapters import SettlementGateway, SettlementOutcome
from app.modules.checkout.enums import PaymentMethod, SessionStatus, TransactionStatus
from app.modules.checkout.errors import (
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    SessionExpiredError,
)
from app.modules.checkout.metrics import checkout_metrics
from app.modules.checkout.models import (
    CheckoutSession,
    PaymentTransaction,
    RedactedPaymentDetails,
)
from app.modules.checkout.repositories import SessionRepository, TransactionRepository
from app.modules.checkout.tasks import DeferredTaskQueue
from app.modules.checkout.utils import Clock, to_iso8601, utcnow

from .session_service import new_record_id

logger = logging.getLogger(__name__)

GATEWAY_ERROR_REASON = "Settlement gateway error"


@dataclass(frozen=True)
class PaymentSubmission:
    transaction: PaymentTransaction
    session: CheckoutSession


def redact_payment_details(
    method: PaymentMethod,
    details: Optional[Mapping[str, Any]],
) -> RedactedPaymentDetails:
    """
    Reduce los datos del instrumento a campos no sensibles.

    Solo se conservan el tipo, los últimos 4 dígitos y la marca; el
    número completo, CVV y fecha de expiración se descartan.
    """
    details = details or {}
    raw_number = details.get("card_number") or details.get("cardNumber")
    last4 = None
    if raw_number:
        digits = "".join(ch for ch in str(raw_number) if ch.isdigit())
        last4 = digits[-4:] or None
    brand = details.get("brand")
    return RedactedPaymentDetails(
        type=method,
        last4=last4,
        brand=str(brand) if brand else None,
    )


def transition_transaction(
    transaction: PaymentTransaction,
    target: TransactionStatus,
    **changes: Any,
) -> PaymentTransaction:
    """
    Copia de la transacción en el estado target.

    Raises:
        InvalidStateError: la transición no está permitida
    """
    if not transaction.status.can_transition_to(target):
        raise InvalidStateError(
            f"transaction {transaction.id} cannot go from {transaction.status} to {target}"
        )
    return replace(transaction, status=target, **changes)


class PaymentService:
    """
    Servicio de pagos: integra sesiones, transacciones y liquidación diferida.
    """

    def __init__(
        self,
        session_repo: SessionRepository,
        transaction_repo: TransactionRepository,
        gateway: SettlementGateway,
        queue: DeferredTaskQueue,
        *,
        settlement_delay_seconds: float = 2.0,
        settlement_jitter_seconds: float = 0.0,
        clock: Clock = utcnow,
        id_factory: Callable[[], str] = new_record_id,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.session_repo = session_repo
        self.transaction_repo = transaction_repo
        self.gateway = gateway
        self.queue = queue
        self.settlement_delay_seconds = settlement_delay_seconds
        self.settlement_jitter_seconds = settlement_jitter_seconds
        self.clock = clock
        self.id_factory = id_factory
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------ #
    # Enviar pago
    # ------------------------------------------------------------------ #
    def submit_payment(
        self,
        session_id: str,
        payment_method: str | PaymentMethod,
        payment_details: Optional[Mapping[str, Any]] = None,
        billing_address: Optional[dict[str, Any]] = None,
    ) -> PaymentSubmission:
        """
        Crea la transacción de la sesión y programa su liquidación.

        Orden de validación: NotFound, Expired, InvalidState, InvalidInput.

        Raises:
            NotFoundError: la sesión no existe
            SessionExpiredError: now > expires_at
            InvalidStateError: la sesión ya no está initialized
            InvalidInputError: método de pago no soportado
        """
        with self.session_repo.locked(session_id):
            session = self.session_repo.get(session_id)
            if session is None:
                raise NotFoundError("session", session_id)

            now = self.clock()
            if session.is_past_expiry(now) or session.status is SessionStatus.EXPIRED:
                raise SessionExpiredError(
                    f"session {session_id} expired at {to_iso8601(session.expires_at)}"
                )
            if session.status is not SessionStatus.INITIALIZED:
                raise InvalidStateError(
                    f"payment already submitted for session {session_id} (status={session.status})"
                )

            method = PaymentMethod.parse(payment_method)
            if method is None:
                raise InvalidInputError(f"unsupported payment method: {payment_method}")

            effective_billing = dict(billing_address) if billing_address else session.billing_address

            pending = PaymentTransaction(
                id=self.id_factory(),
                session_id=session.id,
                user_id=session.user_id,
                amount=session.pricing.total,
                currency=session.pricing.currency,
                payment_method=method,
                payment_details=redact_payment_details(method, payment_details),
                status=TransactionStatus.PENDING,
                created_at=now,
                updated_at=now,
                billing_address=effective_billing,
            )
            transaction = transition_transaction(pending, TransactionStatus.PROCESSING)

            claimed = replace(
                session,
                status=SessionStatus.PROCESSING,
                payment_method=method,
                transaction_id=transaction.id,
                billing_address=effective_billing,
                updated_at=now,
            )
            if not self.session_repo.save(claimed, session.version):
                raise InvalidStateError(f"session {session_id} was modified concurrently")
            stored_tx = self.transaction_repo.add(transaction)

        delay = self._settlement_delay()
        self.queue.schedule(
            settlement_job_id(stored_tx.id),
            lambda: self.settle_transaction(stored_tx.id),
            delay,
            kind="settlement",
        )

        checkout_metrics.observe_payment_submitted(method.value, stored_tx.currency.value, stored_tx.amount)
        logger.info(
            "checkout.payment.submitted session_id=%s transaction_id=%s method=%s amount=%s delay=%.2fs",
            session_id, stored_tx.id, method.value, stored_tx.amount, delay,
        )
        return PaymentSubmission(transaction=stored_tx, session=claimed)

    def _settlement_delay(self) -> float:
        if self.settlement_jitter_seconds <= 0:
            return self.settlement_delay_seconds
        return self.settlement_delay_seconds + self._rng.uniform(0, self.settlement_jitter_seconds)

    # ------------------------------------------------------------------ #
    # Liquidación (trabajo diferido)
    # ------------------------------------------------------------------ #
    def settle_transaction(self, transaction_id: str) -> PaymentTransaction:
        """
        Resuelve una transacción processing a completed/failed.

        Idempotente: si la transacción ya no está processing se devuelve
        sin cambios. Un error del gateway se registra y la transacción
        queda failed (no hay reintentos automáticos).

        Raises:
            NotFoundError: la transacción no existe
        """
        with self.transaction_repo.locked(transaction_id):
            transaction = self.transaction_repo.get(transaction_id)
            if transaction is None:
                raise NotFoundError("transaction", transaction_id)
            if transaction.status is not TransactionStatus.PROCESSING:
                logger.info(
                    "checkout.settlement.skipped transaction_id=%s status=%s",
                    transaction_id, transaction.status,
                )
                return transaction

            try:
                outcome = self.gateway.settle(transaction)
            except Exception:
                logger.exception("checkout.settlement.gateway_error transaction_id=%s", transaction_id)
                outcome = SettlementOutcome.declined(GATEWAY_ERROR_REASON)

            now = self.clock()
            if outcome.success:
                settled = transition_transaction(
                    transaction,
                    TransactionStatus.COMPLETED,
                    completed_at=now,
                    authorization_code=outcome.authorization_code,
                    updated_at=now,
                )
            else:
                settled = transition_transaction(
                    transaction,
                    TransactionStatus.FAILED,
                    failure_reason=outcome.failure_reason,
                    updated_at=now,
                )
            if not self.transaction_repo.save(settled, transaction.version):
                return self.transaction_repo.get(transaction_id) or transaction

        checkout_metrics.inc_settlement(settled.status.value)
        logger.info(
            "checkout.settlement.done transaction_id=%s status=%s auth=%s reason=%s",
            transaction_id, settled.status, settled.authorization_code, settled.failure_reason,
        )
        self._mirror_on_session(settled)
        return settled

    def _mirror_on_session(self, transaction: PaymentTransaction) -> None:
        target = (
            SessionStatus.COMPLETED
            if transaction.status is TransactionStatus.COMPLETED
            else SessionStatus.FAILED
        )
        with self.session_repo.locked(transaction.session_id):
            session = self.session_repo.get(transaction.session_id)
            if session is None or not session.status.can_transition_to(target):
                logger.warning(
                    "checkout.settlement.session_not_mirrored session_id=%s transaction_id=%s",
                    transaction.session_id, transaction.id,
                )
                return
            mirrored = replace(session, status=target, updated_at=transaction.updated_at)
            self.session_repo.save(mirrored, session.version)

    # ------------------------------------------------------------------ #
    # Consultas
    # ------------------------------------------------------------------ #
    def get_transaction_status(self, transaction_id: str) -> PaymentTransaction:
        """
        Raises:
            NotFoundError: la transacción no existe
        """
        transaction = self.transaction_repo.get(transaction_id)
        if transaction is None:
            raise NotFoundError("transaction", transaction_id)
        return transaction

    def count_transactions(self) -> int:
        return self.transaction_repo.count()


def settlement_job_id(transaction_id: str) -> str:
    return f"settle:{transaction_id}"


__all__ = [
    "GATEWAY_ERROR_REASON",
    "PaymentService",
    "PaymentSubmission",
    "redact_payment_details",
    "settlement_job_id",
    "transition_transaction",
]

# Fin del archivo backend/app/modules/checkout/services/payment_service.py
