# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/shipping_option_enum.py

Enum de opciones de envío cotizables.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from enum import StrEnum


class ShippingOption(StrEnum):
    """Opción de envío ofrecida en la cotización."""

    STANDARD = "standard"
    EXPEDITED = "expedited"
    OVERNIGHT = "overnight"


__all__ = ["ShippingOption"]

# Fin del archivo backend/app/modules/checkout/enums/shipping_option_enum.py
