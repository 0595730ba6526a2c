# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_checkout.py

Configuración del motor de checkout y transacciones de pago.

Descripción:
    Centraliza parámetros de precios (impuesto, envío), vida de la sesión,
    liquidación simulada, reembolsos y limpieza periódica de sesiones.
    Todas las variables se leen con prefijo CHECKOUT_ (p. ej. CHECKOUT_TAX_RATE).

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


SettlementGatewayName = Literal["simulated", "always_succeed", "always_fail"]


class CheckoutSettings(BaseSettings):
    """Configuración del motor de checkout."""

    # =========================================================================
    # SESIONES
    # =========================================================================

    session_ttl_minutes: int = Field(
        default=30,
        gt=0,
        description="Minutos de vida de una sesión de checkout antes de expirar",
    )

    default_currency: str = Field(
        default="USD",
        description="Moneda por omisión cuando el cliente no indica una",
    )

    # =========================================================================
    # PRECIOS
    # =========================================================================

    tax_rate: Decimal = Field(
        default=Decimal("0.08"),
        ge=0,
        description="Tasa plana de impuesto aplicada al subtotal",
    )

    free_shipping_threshold: Decimal = Field(
        default=Decimal("100"),
        ge=0,
        description="Subtotal a partir del cual (estrictamente mayor) el envío estándar es gratis",
    )

    flat_shipping_fee: Decimal = Field(
        default=Decimal("9.99"),
        ge=0,
        description="Costo del envío estándar bajo el umbral de envío gratis",
    )

    expedited_free_threshold: Decimal = Field(
        default=Decimal("200"),
        ge=0,
        description="Subtotal a partir del cual el envío exprés usa tarifa reducida",
    )

    expedited_shipping_fee: Decimal = Field(
        default=Decimal("19.99"),
        ge=0,
        description="Tarifa del envío exprés",
    )

    expedited_discounted_fee: Decimal = Field(
        default=Decimal("9.99"),
        ge=0,
        description="Tarifa reducida del envío exprés sobre el umbral",
    )

    overnight_shipping_fee: Decimal = Field(
        default=Decimal("29.99"),
        ge=0,
        description="Tarifa del envío al día siguiente",
    )

    # =========================================================================
    # LIQUIDACIÓN (SETTLEMENT)
    # =========================================================================

    settlement_gateway: SettlementGatewayName = Field(
        default="simulated",
        description="Gateway de liquidación: simulated | always_succeed | always_fail",
    )

    settlement_success_rate: float = Field(
        default=0.9,
        ge=0.0,
        le=1.0,
        description="Probabilidad de éxito del gateway simulado",
    )

    settlement_delay_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Retraso entre el envío del pago y su liquidación",
    )

    settlement_delay_jitter_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Variación aleatoria máxima sumada al retraso de liquidación",
    )

    # =========================================================================
    # REEMBOLSOS
    # =========================================================================

    refund_settlement_delay_seconds: float = Field(
        default=1.0,
        ge=0.0,
        description="Retraso entre la solicitud de reembolso y su liquidación",
    )

    default_refund_reason: str = Field(
        default="Customer request",
        description="Motivo registrado cuando el cliente no indica uno",
    )

    # =========================================================================
    # LIMPIEZA PERIÓDICA
    # =========================================================================

    session_sweep_enabled: bool = Field(
        default=True,
        description="Registra el job periódico que marca sesiones vencidas",
    )

    session_sweep_interval_seconds: int = Field(
        default=60,
        gt=0,
        description="Intervalo del job de expiración de sesiones",
    )

    @field_validator("default_currency", mode="before")
    @classmethod
    def _normalize_currency(cls, v: Optional[str]) -> str:
        """Normaliza la moneda a mayúsculas (usd -> USD)."""
        if v is None or not str(v).strip():
            return "USD"
        return str(v).strip().upper()

    # =========================================================================
    # CONFIGURACIÓN DE PYDANTIC
    # =========================================================================

    model_config = SettingsConfigDict(
        env_prefix="CHECKOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton global
_checkout_settings: Optional[CheckoutSettings] = None


def get_checkout_settings() -> CheckoutSettings:
    """
    Obtiene la instancia global de configuración de checkout.

    Returns:
        CheckoutSettings: Configuración del motor de checkout
    """
    global _checkout_settings
    if _checkout_settings is None:
        _checkout_settings = CheckoutSettings()
    return _checkout_settings


def reset_checkout_settings() -> None:
    """Descarta el singleton (útil en tests que cambian variables de entorno)."""
    global _checkout_settings
    _checkout_settings = None


__all__ = [
    "CheckoutSettings",
    "SettlementGatewayName",
    "get_checkout_settings",
    "reset_checkout_settings",
]
# Fin del archivo backend/app/shared/config/settings_checkout.py
