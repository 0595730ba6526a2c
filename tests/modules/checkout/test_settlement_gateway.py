# -*- coding: utf-8 -*-
"""
backend/tests/modules/checkout/test_settlement_gateway.py

Tests de los gateways de liquidación (simulado y determinista).

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

import random
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from app.modules.checkout.adapters import (
    DECLINED_BY_ISSUER,
    FixedOutcomeSettlementGateway,
    SimulatedSettlementGateway,
    build_settlement_gateway,
)
from app.modules.checkout.enums import Currency, PaymentMethod, TransactionStatus
from app.modules.checkout.models import PaymentTransaction, RedactedPaymentDetails
from app.modules.checkout.utils import epoch_millis

FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def transaction():
    return PaymentTransaction(
        id="tx-1",
        session_id="sess-1",
        user_id="user-1",
        amount=Decimal("107.18"),
        currency=Currency.USD,
        payment_method=PaymentMethod.CREDIT_CARD,
        payment_details=RedactedPaymentDetails(type=PaymentMethod.CREDIT_CARD, last4="4242"),
        status=TransactionStatus.PROCESSING,
        created_at=FIXED_NOW,
        updated_at=FIXED_NOW,
    )


def test_simulated_always_approves_at_full_rate(transaction):
    gateway = SimulatedSettlementGateway(success_rate=1.0, clock=lambda: FIXED_NOW)

    outcome = gateway.settle(transaction)

    assert outcome.success is True
    assert outcome.authorization_code == f"AUTH{epoch_millis(FIXED_NOW)}"
    assert outcome.failure_reason is None


def test_simulated_always_declines_at_zero_rate(transaction):
    gateway = SimulatedSettlementGateway(success_rate=0.0)

    outcome = gateway.settle(transaction)

    assert outcome.success is False
    assert outcome.failure_reason == DECLINED_BY_ISSUER
    assert outcome.authorization_code is None


def test_simulated_rate_is_roughly_respected(transaction):
    gateway = SimulatedSettlementGateway(success_rate=0.9, rng=random.Random(1234))

    approved = sum(gateway.settle(transaction).success for _ in range(2000))

    assert 1700 < approved < 1900


@pytest.mark.parametrize("rate", [-0.1, 1.5])
def test_simulated_rejects_invalid_rate(rate):
    with pytest.raises(ValueError):
        SimulatedSettlementGateway(success_rate=rate)


def test_fixed_outcomes(transaction):
    ok = FixedOutcomeSettlementGateway(succeed=True, clock=lambda: FIXED_NOW).settle(transaction)
    ko = FixedOutcomeSettlementGateway(succeed=False, failure_reason="Insufficient funds").settle(transaction)

    assert ok.success and ok.authorization_code.startswith("AUTH")
    assert not ko.success and ko.failure_reason == "Insufficient funds"


@pytest.mark.parametrize(
    "kind, expected_type, succeed",
    [
        ("simulated", SimulatedSettlementGateway, None),
        ("always_succeed", FixedOutcomeSettlementGateway, True),
        ("always_fail", FixedOutcomeSettlementGateway, False),
    ],
)
def test_build_settlement_gateway(kind, expected_type, succeed):
    settings = SimpleNamespace(settlement_gateway=kind, settlement_success_rate=0.75)

    gateway = build_settlement_gateway(settings)

    assert isinstance(gateway, expected_type)
    if succeed is None:
        assert gateway.success_rate == 0.75
    else:
        assert gateway.succeed is succeed


def test_build_unknown_gateway():
    with pytest.raises(ValueError):
        build_settlement_gateway(SimpleNamespace(settlement_gateway="stripe", settlement_success_rate=1.0))

# Fin del archivo backend/tests/modules/checkout/test_settlement_gateway.py
