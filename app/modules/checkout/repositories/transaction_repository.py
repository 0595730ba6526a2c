# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/repositories/transaction_repository.py

Repositorio de transacciones de pago.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from typing import Optional

from app.modules.checkout.models import PaymentTransaction

from .base_store import InMemoryRecordStore, RecordStore


class TransactionRepository:
    def __init__(self, store: Optional[RecordStore[PaymentTransaction]] = None) -> None:
        self.store: RecordStore[PaymentTransaction] = store or InMemoryRecordStore("transactions")

    def get(self, transaction_id: str) -> Optional[PaymentTransaction]:
        return self.store.get(transaction_id)

    def add(self, transaction: PaymentTransaction) -> PaymentTransaction:
        return self.store.put(transaction)

    def save(self, transaction: PaymentTransaction, expected_version: int) -> bool:
        return self.store.compare_and_swap(transaction, expected_version)

    def locked(self, transaction_id: str):
        return self.store.locked(transaction_id)

    def count(self) -> int:
        return self.store.count()

    # -----------------------------------------------------------
    # Búsqueda por sesión (a lo más una transacción por sesión)
    # -----------------------------------------------------------
    def get_by_session_id(self, session_id: str) -> Optional[PaymentTransaction]:
        for tx in self.store.list():
            if tx.session_id == session_id:
                return tx
        return None


__all__ = ["TransactionRepository"]

# Fin del archivo backend/app/modules/checkout/repositories/transaction_repository.py
