# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/errors.py

Taxonomía de errores del motor de checkout.

Todas las operaciones fallan de forma síncrona con una de estas
excepciones; la capa HTTP las traduce a códigos de estado. Las fallas
de liquidación NO son excepciones: quedan registradas como datos
(transacción en estado failed).

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations


class CheckoutError(Exception):
    """Error base del dominio checkout."""

    error_code: str = "checkout_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(CheckoutError, ValueError):
    """Entrada mal formada (items vacíos, montos fuera de rango, método no soportado)."""

    error_code = "invalid_input"


class NotFoundError(CheckoutError, LookupError):
    """La sesión, transacción o reembolso referenciado no existe."""

    error_code = "not_found"

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(f"{resource} not found: {resource_id}")
        self.resource = resource
        self.resource_id = resource_id


class SessionExpiredError(CheckoutError):
    """La sesión superó su expires_at."""

    error_code = "session_expired"


class InvalidStateError(CheckoutError):
    """La operación no es válida para el estado actual del registro."""

    error_code = "invalid_state"


__all__ = [
    "CheckoutError",
    "InvalidInputError",
    "NotFoundError",
    "SessionExpiredError",
    "InvalidStateError",
]

# Fin del archivo backend/app/modules/checkout/errors.py
