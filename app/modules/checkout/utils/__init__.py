# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/utils/__init__.py

Utilidades del módulo Checkout (tiempo y dinero).

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .datetime_helpers import Clock, epoch_millis, to_iso8601, utcnow
from .money import quantize, to_decimal, to_money

__all__ = ["Clock", "epoch_millis", "to_iso8601", "utcnow", "quantize", "to_decimal", "to_money"]
