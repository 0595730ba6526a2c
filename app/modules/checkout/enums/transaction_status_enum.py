# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/transaction_status_enum.py

Enum de estados de la transacción de pago.

Transiciones válidas:
    pending    -> processing | cancelled
    processing -> completed | failed | cancelled
    completed  -> refunded
    failed / cancelled / refunded son terminales.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from enum import StrEnum


class TransactionStatus(StrEnum):
    """Estado de la transacción en su ciclo de vida de liquidación."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"

    @property
    def is_final(self) -> bool:
        """True si el cliente ya no necesita seguir consultando el estado."""
        return self in FINAL_TRANSACTION_STATUSES

    def can_transition_to(self, target: "TransactionStatus") -> bool:
        return target in TRANSACTION_TRANSITIONS[self]


TRANSACTION_TRANSITIONS: dict[TransactionStatus, frozenset[TransactionStatus]] = {
    TransactionStatus.PENDING: frozenset({TransactionStatus.PROCESSING, TransactionStatus.CANCELLED}),
    TransactionStatus.PROCESSING: frozenset({
        TransactionStatus.COMPLETED,
        TransactionStatus.FAILED,
        TransactionStatus.CANCELLED,
    }),
    TransactionStatus.COMPLETED: frozenset({TransactionStatus.REFUNDED}),
    TransactionStatus.FAILED: frozenset(),
    TransactionStatus.CANCELLED: frozenset(),
    TransactionStatus.REFUNDED: frozenset(),
}

# completed es final para el polling aunque admita un reembolso posterior
FINAL_TRANSACTION_STATUSES: frozenset[TransactionStatus] = frozenset({
    TransactionStatus.COMPLETED,
    TransactionStatus.FAILED,
    TransactionStatus.CANCELLED,
    TransactionStatus.REFUNDED,
})


__all__ = ["TransactionStatus", "TRANSACTION_TRANSITIONS", "FINAL_TRANSACTION_STATUSES"]

# Fin del archivo backend/app/modules/checkout/enums/transaction_status_enum.py
