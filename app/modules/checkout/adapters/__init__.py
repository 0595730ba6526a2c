# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/adapters/__init__.py

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .settlement_gateway import (
    DECLINED_BY_ISSUER,
    FixedOutcomeSettlementGateway,
    SettlementGateway,
    SettlementOutcome,
    SimulatedSettlementGateway,
    build_settlement_gateway,
)

__all__ = [
    "DECLINED_BY_ISSUER",
    "FixedOutcomeSettlementGateway",
    "SettlementGateway",
    "SettlementOutcome",
    "SimulatedSettlementGateway",
    "build_settlement_gateway",
]
