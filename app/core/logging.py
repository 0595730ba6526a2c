# -*- coding: utf-8 -*-
"""
backend/app/core/logging.py

Punto de entrada de logging bajo `app.core`.
Traduce los settings del entorno a la configuración de
`app.shared.config.logging_config`.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from app.shared.config.logging_config import setup_logging
from app.shared.config.settings_base import BaseAppSettings


def configure_logging(settings: BaseAppSettings) -> None:
    """Aplica LOG_LEVEL / LOG_FORMAT y etiqueta los eventos con APP_NAME."""
    setup_logging(
        level=settings.log_level,
        fmt=settings.log_format,
        service=settings.app_name,
    )


__all__ = ["configure_logging", "setup_logging"]
# Fin del archivo backend/app/core/logging.py
