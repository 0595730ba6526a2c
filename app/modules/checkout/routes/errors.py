# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/routes/errors.py

Traducción de errores de dominio a HTTPException.

    InvalidInputError   -> 400
    NotFoundError       -> 404
    InvalidStateError   -> 409
    SessionExpiredError -> 410

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

from fastapi import HTTPException, status

from app.modules.checkout.errors import (
    CheckoutError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    SessionExpiredError,
)

_STATUS_BY_ERROR: tuple[tuple[type[CheckoutError], int], ...] = (
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidStateError, status.HTTP_409_CONFLICT),
    (SessionExpiredError, status.HTTP_410_GONE),
)


def to_http_exception(exc: CheckoutError) -> HTTPException:
    status_code = status.HTTP_400_BAD_REQUEST
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            status_code = code
            break
    return HTTPException(
        status_code=status_code,
        detail={"error": exc.error_code, "message": exc.message},
    )


__all__ = ["to_http_exception"]

# Fin del archivo backend/app/modules/checkout/routes/errors.py
