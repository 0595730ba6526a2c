# -*- coding: utf-8 -*-
"""
backend/app/shared/config/config_loader.py

Carga dinámica de configuración según PYTHON_ENV.

Además de las validaciones de seguridad del entorno, verifica que la
configuración del motor de checkout sea coherente antes de aceptar tráfico
(una moneda por omisión no soportada rompería cada CreateSession).

Autor: Ixchel Beristain
Actualizado: 2026-10-19
"""

from functools import lru_cache
import os
from typing import Dict, Type

from .settings_base import BaseAppSettings
from .settings_checkout import get_checkout_settings
from .settings_dev import DevSettings
from .settings_testing import EnvTestingSettings
from .settings_prod import ProdSettings

# Alias aceptados en PYTHON_ENV
_ENVIRONMENTS: Dict[str, Type[BaseAppSettings]] = {
    "production": ProdSettings,
    "prod": ProdSettings,
    "test": EnvTestingSettings,
    "testing": EnvTestingSettings,
    "development": DevSettings,
    "dev": DevSettings,
}


def resolve_settings_class(env: str) -> Type[BaseAppSettings]:
    """Clase de settings para un valor de PYTHON_ENV (desconocido = desarrollo)."""
    return _ENVIRONMENTS.get(env.strip().lower(), DevSettings)


def _checkout_checks() -> None:
    from app.modules.checkout.enums import Currency

    checkout = get_checkout_settings()
    if Currency.parse(checkout.default_currency) is None:
        raise ValueError(
            f"CHECKOUT_DEFAULT_CURRENCY '{checkout.default_currency}' is not a supported currency"
        )


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración apropiada según PYTHON_ENV.

    Returns:
        BaseAppSettings: Instancia de configuración para el entorno actual

    Raises:
        ValueError: Si las validaciones de seguridad o de checkout fallan
    """
    settings_cls = resolve_settings_class(os.getenv("PYTHON_ENV", "development"))
    settings = settings_cls()

    settings._security_checks()
    _checkout_checks()

    return settings


__all__ = ["get_settings", "resolve_settings_class"]
# Fin del archivo backend/app/shared/config/config_loader.py
