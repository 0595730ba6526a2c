# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/repositories/session_repository.py

Repositorio de sesiones de checkout.

Responsabilidades:
- Alta y lectura por id
- Escritura optimista (compare-and-swap por versión)
- Listado de sesiones vencidas aún en initialized (barrido de expiración)

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from app.modules.checkout.enums import SessionStatus
from app.modules.checkout.models import CheckoutSession

from .base_store import InMemoryRecordStore, RecordStore


class SessionRepository:
    def __init__(self, store: Optional[RecordStore[CheckoutSession]] = None) -> None:
        self.store: RecordStore[CheckoutSession] = store or InMemoryRecordStore("sessions")

    def get(self, session_id: str) -> Optional[CheckoutSession]:
        return self.store.get(session_id)

    def add(self, session: CheckoutSession) -> CheckoutSession:
        return self.store.put(session)

    def save(self, session: CheckoutSession, expected_version: int) -> bool:
        return self.store.compare_and_swap(session, expected_version)

    def locked(self, session_id: str):
        return self.store.locked(session_id)

    def count(self) -> int:
        return self.store.count()

    # -----------------------------------------------------------
    # Expiración
    # -----------------------------------------------------------
    def list_stale(self, now: datetime) -> list[CheckoutSession]:
        return [
            s for s in self.store.list()
            if s.status is SessionStatus.INITIALIZED and s.is_past_expiry(now)
        ]


__all__ = ["SessionRepository"]

# Fin del archivo backend/app/modules/checkout/repositories/session_repository.py
