# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/dependencies.py

Ensamblado del motor de checkout (stores, gateway, cola y servicios).

Las rutas obtienen el motor vía Depends(get_checkout_engine); las pruebas
construyen motores aislados con build_checkout_engine(...) y lo inyectan
con app.dependency_overrides o reset_checkout_engine().

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from app.shared.config.settings_checkout import CheckoutSettings, get_checkout_settings

from .adapters import SettlementGateway, build_settlement_gateway
from .enums import Currency
from .repositories import RefundRepository, SessionRepository, TransactionRepository
from .services import (
    PaymentService,
    PricingRules,
    RefundService,
    SessionService,
    ShippingRates,
)
from .tasks import DeferredTaskQueue
from .utils import Clock, utcnow

logger = logging.getLogger(__name__)


@dataclass
class CheckoutEngine:
    settings: CheckoutSettings
    sessions: SessionService
    payments: PaymentService
    refunds: RefundService
    queue: DeferredTaskQueue
    shipping_rates: ShippingRates

    def health_snapshot(self) -> dict[str, int]:
        return {
            "sessions": self.sessions.count_sessions(),
            "transactions": self.payments.count_transactions(),
            "pending_jobs": self.queue.pending_count(),
        }


def build_checkout_engine(
    settings: Optional[CheckoutSettings] = None,
    *,
    gateway: Optional[SettlementGateway] = None,
    queue: Optional[DeferredTaskQueue] = None,
    clock: Clock = utcnow,
    session_repo: Optional[SessionRepository] = None,
    transaction_repo: Optional[TransactionRepository] = None,
    refund_repo: Optional[RefundRepository] = None,
) -> CheckoutEngine:
    """
    Construye un motor completo a partir de settings.

    Cualquier colaborador puede sustituirse (stores, gateway, cola, reloj).
    """
    settings = settings or get_checkout_settings()
    default_currency = Currency.parse(settings.default_currency)
    if default_currency is None:
        raise ValueError(f"unsupported default currency: {settings.default_currency}")

    session_repo = session_repo or SessionRepository()
    transaction_repo = transaction_repo or TransactionRepository()
    refund_repo = refund_repo or RefundRepository()
    gateway = gateway or build_settlement_gateway(settings, clock=clock)
    queue = queue or DeferredTaskQueue()

    sessions = SessionService(
        session_repo,
        pricing_rules=PricingRules.from_settings(settings),
        ttl=timedelta(minutes=settings.session_ttl_minutes),
        default_currency=default_currency,
        clock=clock,
    )
    payments = PaymentService(
        session_repo,
        transaction_repo,
        gateway,
        queue,
        settlement_delay_seconds=settings.settlement_delay_seconds,
        settlement_jitter_seconds=settings.settlement_delay_jitter_seconds,
        clock=clock,
    )
    refunds = RefundService(
        refund_repo,
        transaction_repo,
        queue,
        settlement_delay_seconds=settings.refund_settlement_delay_seconds,
        default_reason=settings.default_refund_reason,
        clock=clock,
    )
    logger.debug("checkout.engine.built gateway=%s", gateway.name)
    return CheckoutEngine(
        settings=settings,
        sessions=sessions,
        payments=payments,
        refunds=refunds,
        queue=queue,
        shipping_rates=ShippingRates.from_settings(settings),
    )


# Singleton global
_engine: Optional[CheckoutEngine] = None
_engine_lock = threading.Lock()


def get_checkout_engine() -> CheckoutEngine:
    """Obtiene (o construye) el motor global."""
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = build_checkout_engine()
        return _engine


def reset_checkout_engine(engine: Optional[CheckoutEngine] = None) -> None:
    """Reemplaza el motor global (None = se reconstruye en el próximo acceso)."""
    global _engine
    with _engine_lock:
        _engine = engine


__all__ = [
    "CheckoutEngine",
    "build_checkout_engine",
    "get_checkout_engine",
    "reset_checkout_engine",
]

# Fin del archivo backend/app/modules/checkout/dependencies.py
