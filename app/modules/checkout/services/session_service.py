# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/services/session_service.py

Gestor de sesiones de checkout.

Flujos cubiertos:
- Crear sesión: valida items y moneda, calcula precio, fija expires_at
- Leer sesión con expiración perezosa (initialized -> expired al leer)
- Barrido periódico de sesiones vencidas (housekeeping, opcional)

Una sesión vencida siempre se reporta como `expired` al leerla, aunque
su registro conserve el estado que le dejó la liquidación
(processing/completed/failed): ese estado sigue siendo consultable a
través de la transacción.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, Mapping, Optional

from app.modules.checkout.enums import Currency, SessionStatus
from app.modules.checkout.errors import InvalidInputError, NotFoundError
from app.modules.checkout.metrics import checkout_metrics
from app.modules.checkout.models import CheckoutSession, LineItem
from app.modules.checkout.repositories import SessionRepository
from app.modules.checkout.utils import Clock, utcnow

from .pricing_service import PricingRules, build_line_items, compute_pricing

logger = logging.getLogger(__name__)


def new_record_id() -> str:
    return str(uuid.uuid4())


class SessionService:
    """
    Crea, lee y expira sesiones de checkout.
    """

    def __init__(
        self,
        session_repo: SessionRepository,
        *,
        pricing_rules: Optional[PricingRules] = None,
        ttl: timedelta = timedelta(minutes=30),
        default_currency: Currency = Currency.USD,
        clock: Clock = utcnow,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        if ttl <= timedelta(0):
            raise ValueError("ttl must be > 0")
        self.session_repo = session_repo
        self.pricing_rules = pricing_rules or PricingRules()
        self.ttl = ttl
        self.default_currency = default_currency
        self.clock = clock
        self.id_factory = id_factory

    # ------------------------------------------------------------------ #
    # Crear sesión
    # ------------------------------------------------------------------ #
    def create_session(
        self,
        user_id: str,
        items: Iterable[LineItem | Mapping[str, Any]],
        *,
        currency: Optional[str | Currency] = None,
        shipping_address: Optional[dict[str, Any]] = None,
        billing_address: Optional[dict[str, Any]] = None,
    ) -> CheckoutSession:
        """
        Congela el carrito, calcula su precio y abre una sesión initialized.

        Raises:
            InvalidInputError: user_id vacío, items vacíos/mal formados,
                moneda no soportada
        """
        if not isinstance(user_id, str) or not user_id.strip():
            raise InvalidInputError("user_id is required")

        resolved_currency = self._resolve_currency(currency)
        line_items = build_line_items(items)
        pricing = compute_pricing(line_items, self.pricing_rules, resolved_currency)

        now = self.clock()
        session = CheckoutSession(
            id=self.id_factory(),
            user_id=user_id,
            items=line_items,
            pricing=pricing,
            status=SessionStatus.INITIALIZED,
            created_at=now,
            expires_at=now + self.ttl,
            updated_at=now,
            shipping_address=dict(shipping_address) if shipping_address else None,
            billing_address=dict(billing_address) if billing_address else None,
        )
        stored = self.session_repo.add(session)

        checkout_metrics.inc_session_created(resolved_currency.value)
        logger.info(
            "checkout.session.created session_id=%s user_id=%s items=%d total=%s %s",
            stored.id, user_id, len(line_items), pricing.total, resolved_currency.value,
        )
        return stored

    def _resolve_currency(self, currency: Optional[str | Currency]) -> Currency:
        if currency is None or (isinstance(currency, str) and not currency.strip()):
            return self.default_currency
        parsed = Currency.parse(currency)
        if parsed is None:
            raise InvalidInputError(f"unsupported currency: {currency}")
        return parsed

    # ------------------------------------------------------------------ #
    # Leer sesión (expiración perezosa)
    # ------------------------------------------------------------------ #
    def get_session(self, session_id: str) -> CheckoutSession:
        """
        Devuelve la sesión; si ya venció la reporta como expired.

        Raises:
            NotFoundError: la sesión no existe
        """
        session = self.session_repo.get(session_id)
        if session is None:
            raise NotFoundError("session", session_id)

        now = self.clock()
        if not session.is_past_expiry(now):
            return session

        if session.status is SessionStatus.INITIALIZED:
            session, _ = self._mark_expired(session, now)
        if session.status is not SessionStatus.EXPIRED:
            # Vista expirada; el registro conserva el resultado de la liquidación
            session = replace(session, status=SessionStatus.EXPIRED)
        return session

    def _mark_expired(self, session: CheckoutSession, now: datetime) -> tuple[CheckoutSession, bool]:
        """
        initialized -> expired con compare-and-swap.

        Si otra escritura ganó la carrera (p. ej. un pago que entró justo
        antes del vencimiento) se devuelve el registro vigente.
        """
        with self.session_repo.locked(session.id):
            current = self.session_repo.get(session.id) or session
            if current.status is not SessionStatus.INITIALIZED or not current.is_past_expiry(now):
                return current, False
            expired = replace(current, status=SessionStatus.EXPIRED, updated_at=now)
            if not self.session_repo.save(expired, current.version):
                return self.session_repo.get(session.id) or current, False
        checkout_metrics.inc_session_expired()
        logger.info("checkout.session.expired session_id=%s", session.id)
        return expired, True

    # ------------------------------------------------------------------ #
    # Barrido periódico
    # ------------------------------------------------------------------ #
    def expire_stale_sessions(self) -> int:
        """Marca como expired toda sesión initialized ya vencida. Devuelve cuántas."""
        now = self.clock()
        expired = 0
        for session in self.session_repo.list_stale(now):
            _, changed = self._mark_expired(session, now)
            if changed:
                expired += 1
        if expired:
            logger.info("checkout.session.sweep expired=%d", expired)
        return expired

    def count_sessions(self) -> int:
        return self.session_repo.count()


__all__ = ["SessionService", "new_record_id"]

# Fin del archivo backend/app/modules/checkout/services/session_service.py
