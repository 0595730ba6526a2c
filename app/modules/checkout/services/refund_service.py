# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/services/refund_service.py

Procesador de reembolsos.

Flujos cubiertos:
- Solicitar reembolso de una transacción completed:
    - crea el refund en processing
    - marca la transacción como refunded (de inmediato, misma sección crítica)
    - programa la liquidación del refund
- Liquidar refund: processing -> completed (idempotente)
- Consultar refund

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Callable, Optional

from app.modules.checkout.enums import RefundStatus, TransactionStatus
from app.modules.checkout.errors import InvalidInputError, InvalidStateError, NotFoundError
from app.modules.checkout.metrics import checkout_metrics
from app.modules.checkout.models import PaymentTransaction, Refund
from app.modules.checkout.repositories import RefundRepository, TransactionRepository
from app.modules.checkout.tasks import DeferredTaskQueue
from app.modules.checkout.utils import Clock, to_money, utcnow

from .payment_service import transition_transaction
from .session_service import new_record_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefundResult:
    refund: Refund
    transaction: PaymentTransaction


class RefundService:
    """
    Servicio de reembolsos: integra refunds con transacciones.
    """

    def __init__(
        self,
        refund_repo: RefundRepository,
        transaction_repo: TransactionRepository,
        queue: DeferredTaskQueue,
        *,
        settlement_delay_seconds: float = 1.0,
        default_reason: str = "Customer request",
        clock: Clock = utcnow,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        self.refund_repo = refund_repo
        self.transaction_repo = transaction_repo
        self.queue = queue
        self.settlement_delay_seconds = settlement_delay_seconds
        self.default_reason = default_reason
        self.clock = clock
        self.id_factory = id_factory

    # ------------------------------------------------------------------ #
    # Solicitar reembolso
    # ------------------------------------------------------------------ #
    def request_refund(
        self,
        transaction_id: str,
        amount: Optional[Any] = None,
        reason: Optional[str] = None,
    ) -> RefundResult:
        """
        Reembolsa (total o parcialmente) una transacción completed.

        Sin amount se reembolsa el monto completo de la transacción.

        Raises:
            NotFoundError: la transacción no existe
            InvalidStateError: la transacción no está completed
            InvalidInputError: amount <= 0 o mayor al de la transacción
        """
        with self.transaction_repo.locked(transaction_id):
            transaction = self.transaction_repo.get(transaction_id)
            if transaction is None:
                raise NotFoundError("transaction", transaction_id)
            if transaction.status is not TransactionStatus.COMPLETED:
                raise InvalidStateError(
                    f"transaction {transaction_id} is {transaction.status}; only completed transactions can be refunded"
                )

            refund_amount = self._resolve_amount(transaction, amount)

            now = self.clock()
            refund = Refund(
                id=self.id_factory(),
                transaction_id=transaction.id,
                amount=refund_amount,
                currency=transaction.currency,
                reason=(reason or "").strip() or self.default_reason,
                status=RefundStatus.PROCESSING,
                created_at=now,
            )
            refunded = transition_transaction(
                transaction,
                TransactionStatus.REFUNDED,
                refund_id=refund.id,
                refund_amount=refund_amount,
                updated_at=now,
            )
            if not self.transaction_repo.save(refunded, transaction.version):
                raise InvalidStateError(f"transaction {transaction_id} was modified concurrently")
            stored_refund = self.refund_repo.add(refund)

        self.queue.schedule(
            refund_job_id(stored_refund.id),
            lambda: self.settle_refund(stored_refund.id),
            self.settlement_delay_seconds,
            kind="refund",
        )

        checkout_metrics.inc_refund_requested()
        logger.info(
            "checkout.refund.requested refund_id=%s transaction_id=%s amount=%s reason=%s",
            stored_refund.id, transaction_id, refund_amount, stored_refund.reason,
        )
        return RefundResult(refund=stored_refund, transaction=refunded)

    def _resolve_amount(self, transaction: PaymentTransaction, amount: Optional[Any]) -> Decimal:
        if amount is None:
            return transaction.amount
        value = to_money(amount, transaction.currency, field="amount")
        if value <= 0:
            raise InvalidInputError("amount must be > 0")
        if value > transaction.amount:
            raise InvalidInputError(
                f"amount {value} exceeds transaction amount {transaction.amount}"
            )
        return value

    # ------------------------------------------------------------------ #
    # Liquidar reembolso (trabajo diferido)
    # ------------------------------------------------------------------ #
    def settle_refund(self, refund_id: str) -> Refund:
        """
        processing -> completed. Idempotente.

        Raises:
            NotFoundError: el refund no existe
        """
        with self.refund_repo.locked(refund_id):
            refund = self.refund_repo.get(refund_id)
            if refund is None:
                raise NotFoundError("refund", refund_id)
            if not refund.status.can_transition_to(RefundStatus.COMPLETED):
                return refund

            completed = replace(refund, status=RefundStatus.COMPLETED, completed_at=self.clock())
            if not self.refund_repo.save(completed, refund.version):
                return self.refund_repo.get(refund_id) or refund

        checkout_metrics.inc_refund_completed()
        logger.info("checkout.refund.completed refund_id=%s transaction_id=%s", refund_id, completed.transaction_id)
        return completed

    # ------------------------------------------------------------------ #
    # Consultas
    # ------------------------------------------------------------------ #
    def get_refund(self, refund_id: str) -> Refund:
        """
        Raises:
            NotFoundError: el refund no existe
        """
        refund = self.refund_repo.get(refund_id)
        if refund is None:
            raise NotFoundError("refund", refund_id)
        return refund


def refund_job_id(refund_id: str) -> str:
    return f"refund:{refund_id}"


__all__ = ["RefundResult", "RefundService", "refund_job_id"]

# Fin del archivo backend/app/modules/checkout/services/refund_service.py
