# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/repositories/__init__.py

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .base_store import InMemoryRecordStore, RecordStore
from .refund_repository import RefundRepository
from .session_repository import SessionRepository
from .transaction_repository import TransactionRepository

__all__ = [
    "InMemoryRecordStore",
    "RecordStore",
    "RefundRepository",
    "SessionRepository",
    "TransactionRepository",
]
