# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/refund_status_enum.py

Enum de estado del reembolso.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from enum import StrEnum


class RefundStatus(StrEnum):
    """Estado del reembolso (processing -> completed)."""

    PROCESSING = "processing"
    COMPLETED = "completed"

    def can_transition_to(self, target: "RefundStatus") -> bool:
        return self is RefundStatus.PROCESSING and target is RefundStatus.COMPLETED


__all__ = ["RefundStatus"]

# Fin del archivo backend/app/modules/checkout/enums/refund_status_enum.py
