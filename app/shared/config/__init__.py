# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import get_settings, get_checkout_settings

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .config_loader import get_settings
from .logging_config import setup_logging
from .settings_base import BaseAppSettings
from .settings_checkout import (
    CheckoutSettings,
    get_checkout_settings,
    reset_checkout_settings,
)

__all__ = [
    "BaseAppSettings",
    "CheckoutSettings",
    "get_settings",
    "get_checkout_settings",
    "reset_checkout_settings",
    "setup_logging",
]
# Fin del archivo backend/app/shared/config/__init__.py
