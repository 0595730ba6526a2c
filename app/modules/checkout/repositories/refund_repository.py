# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/repositories/refund_repository.py

Repositorio de reembolsos.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from typing import Optional

from app.modules.checkout.models import Refund

from .base_store import InMemoryRecordStore, RecordStore


class RefundRepository:
    def __init__(self, store: Optional[RecordStore[Refund]] = None) -> None:
        self.store: RecordStore[Refund] = store or InMemoryRecordStore("refunds")

    def get(self, refund_id: str) -> Optional[Refund]:
        return self.store.get(refund_id)

    def add(self, refund: Refund) -> Refund:
        return self.store.put(refund)

    def save(self, refund: Refund, expected_version: int) -> bool:
        return self.store.compare_and_swap(refund, expected_version)

    def locked(self, refund_id: str):
        return self.store.locked(refund_id)

    def count(self) -> int:
        return self.store.count()

    def get_by_transaction_id(self, transaction_id: str) -> Optional[Refund]:
        for refund in self.store.list():
            if refund.transaction_id == transaction_id:
                return refund
        return None


__all__ = ["RefundRepository"]

# Fin del archivo backend/app/modules/checkout/repositories/refund_repository.py
