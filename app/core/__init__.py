# -*- coding: utf-8 -*-
"""
backend/app/core/__init__.py

Fachada unificada para componentes centrales del servicio de checkout:
- Configuración (settings)
- Logging

Esta capa envuelve la implementación existente en `app.shared.*` para
ofrecer puntos de entrada estables hacia el resto de los módulos.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .settings import get_settings, get_checkout_settings
from .logging import configure_logging, setup_logging

__all__ = [
    "get_settings",
    "get_checkout_settings",
    "configure_logging",
    "setup_logging",
]

# Fin del archivo backend/app/core/__init__.py
