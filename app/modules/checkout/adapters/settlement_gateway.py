# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/adapters/settlement_gateway.py

Gateways de liquidación de pagos.

Nota:
- NINGUNA variante llama a una red de pago real.
- SimulatedSettlementGateway reproduce el comportamiento histórico del
  servicio: éxito con probabilidad configurable (90% por omisión),
  código de autorización AUTH<epoch-ms> y motivo de rechazo fijo.
- FixedOutcomeSettlementGateway da resultados deterministas para
  pruebas y entornos de QA.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from app.modules.checkout.models import PaymentTransaction
from app.modules.checkout.utils import Clock, epoch_millis, utcnow

logger = logging.getLogger(__name__)

DECLINED_BY_ISSUER = "Payment declined by issuer"


@dataclass(frozen=True)
class SettlementOutcome:
    success: bool
    authorization_code: Optional[str] = None
    failure_reason: Optional[str] = None

    @classmethod
    def approved(cls, authorization_code: str) -> "SettlementOutcome":
        return cls(success=True, authorization_code=authorization_code)

    @classmethod
    def declined(cls, reason: str = DECLINED_BY_ISSUER) -> "SettlementOutcome":
        return cls(success=False, failure_reason=reason)


class SettlementGateway(ABC):
    """Capacidad de liquidar una transacción (aprobar o rechazar)."""

    name: str = "gateway"

    @abstractmethod
    def settle(self, transaction: PaymentTransaction) -> SettlementOutcome:
        """
        Decide el resultado de una transacción processing.

        Se invoca con el candado de la transacción tomado, desde un hilo de
        trabajo (temporizador de DeferredTaskQueue) o desde el hilo que fuerza
        la liquidación. Una implementación con red debe fijar un timeout corto:
        mientras responde, otras escrituras sobre esa transacción esperan.
        """


def _authorization_code(clock: Clock) -> str:
    return f"AUTH{epoch_millis(clock())}"


# ============================================================================
# GATEWAY SIMULADO
# ============================================================================

class SimulatedSettlementGateway(SettlementGateway):
    name = "simulated"

    def __init__(
        self,
        success_rate: float = 0.9,
        rng: Optional[random.Random] = None,
        clock: Clock = utcnow,
    ) -> None:
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError("success_rate must be between 0 and 1")
        self.success_rate = success_rate
        self._rng = rng or random.Random()
        self._clock = clock

    def settle(self, transaction: PaymentTransaction) -> SettlementOutcome:
        if self._rng.random() < self.success_rate:
            return SettlementOutcome.approved(_authorization_code(self._clock))
        logger.info("checkout.gateway.declined transaction_id=%s", transaction.id)
        return SettlementOutcome.declined()


# ============================================================================
# GATEWAY DETERMINISTA
# ============================================================================

class FixedOutcomeSettlementGateway(SettlementGateway):
    name = "fixed"

    def __init__(
        self,
        succeed: bool = True,
        failure_reason: str = DECLINED_BY_ISSUER,
        clock: Clock = utcnow,
    ) -> None:
        self.succeed = succeed
        self.failure_reason = failure_reason
        self._clock = clock

    def settle(self, transaction: PaymentTransaction) -> SettlementOutcome:
        if self.succeed:
            return SettlementOutcome.approved(_authorization_code(self._clock))
        return SettlementOutcome.declined(self.failure_reason)


def build_settlement_gateway(settings: Any, clock: Clock = utcnow) -> SettlementGateway:
    """Construye el gateway indicado por settings.settlement_gateway."""
    kind = settings.settlement_gateway
    if kind == "always_succeed":
        return FixedOutcomeSettlementGateway(succeed=True, clock=clock)
    if kind == "always_fail":
        return FixedOutcomeSettlementGateway(succeed=False, clock=clock)
    if kind == "simulated":
        return SimulatedSettlementGateway(success_rate=settings.settlement_success_rate, clock=clock)
    raise ValueError(f"unknown settlement gateway: {kind}")


__all__ = [
    "DECLINED_BY_ISSUER",
    "SettlementOutcome",
    "SettlementGateway",
    "SimulatedSettlementGateway",
    "FixedOutcomeSettlementGateway",
    "build_settlement_gateway",
]

# Fin del archivo backend/app/modules/checkout/adapters/settlement_gateway.py
