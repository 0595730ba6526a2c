# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/metrics/prometheus_exporter.py

Exporter Prometheus para el motor de checkout.
Registro propio (no el global) para que /checkout/metrics solo exponga
métricas de negocio y las pruebas puedan leerlas sin ruido HTTP.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from decimal import Decimal

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

# --------------------------------------------------------------------------
# Registro del módulo
# --------------------------------------------------------------------------
registry = CollectorRegistry()

# --------------------------------------------------------------------------
# Sesiones
# --------------------------------------------------------------------------
SESSIONS_CREATED_TOTAL = Counter(
    "checkout_sessions_created_total",
    "Sesiones de checkout creadas",
    ["currency"],
    registry=registry,
)
SESSIONS_EXPIRED_TOTAL = Counter(
    "checkout_sessions_expired_total",
    "Sesiones marcadas como expiradas (lazy o por barrido)",
    registry=registry,
)

# --------------------------------------------------------------------------
# Pagos y liquidación
# --------------------------------------------------------------------------
PAYMENTS_SUBMITTED_TOTAL = Counter(
    "checkout_payments_submitted_total",
    "Pagos aceptados para liquidación",
    ["payment_method"],
    registry=registry,
)
SETTLEMENTS_TOTAL = Counter(
    "checkout_settlements_total",
    "Liquidaciones por resultado (completed/failed)",
    ["outcome"],
    registry=registry,
)
TRANSACTION_AMOUNT = Histogram(
    "checkout_transaction_amount",
    "Monto de transacciones enviadas",
    ["currency"],
    buckets=(10, 25, 50, 100, 250, 500, 1000, 5000),
    registry=registry,
)

# --------------------------------------------------------------------------
# Reembolsos
# --------------------------------------------------------------------------
REFUNDS_REQUESTED_TOTAL = Counter(
    "checkout_refunds_requested_total",
    "Reembolsos solicitados",
    registry=registry,
)
REFUNDS_COMPLETED_TOTAL = Counter(
    "checkout_refunds_completed_total",
    "Reembolsos liquidados",
    registry=registry,
)


# --------------------------------------------------------------------------
# Helpers de instrumentación
# --------------------------------------------------------------------------
def inc_session_created(currency: str) -> None:
    SESSIONS_CREATED_TOTAL.labels(currency).inc()


def inc_session_expired(count: int = 1) -> None:
    if count > 0:
        SESSIONS_EXPIRED_TOTAL.inc(count)


def observe_payment_submitted(payment_method: str, currency: str, amount: Decimal) -> None:
    PAYMENTS_SUBMITTED_TOTAL.labels(payment_method).inc()
    TRANSACTION_AMOUNT.labels(currency).observe(float(amount))


def inc_settlement(outcome: str) -> None:
    SETTLEMENTS_TOTAL.labels(outcome).inc()


def inc_refund_requested() -> None:
    REFUNDS_REQUESTED_TOTAL.inc()


def inc_refund_completed() -> None:
    REFUNDS_COMPLETED_TOTAL.inc()


def export_metrics() -> tuple[bytes, str]:
    """Serializa el registro en formato texto de Prometheus."""
    return generate_latest(registry), CONTENT_TYPE_LATEST


__all__ = [
    "registry",
    "inc_session_created",
    "inc_session_expired",
    "observe_payment_submitted",
    "inc_settlement",
    "inc_refund_requested",
    "inc_refund_completed",
    "export_metrics",
]

# Fin del archivo backend/app/modules/checkout/metrics/prometheus_exporter.py
