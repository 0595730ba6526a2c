# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/metrics/__init__.py

Métricas Prometheus del motor de checkout.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from . import prometheus_exporter as checkout_metrics
from .prometheus_exporter import export_metrics, registry

__all__ = ["checkout_metrics", "export_metrics", "registry"]
