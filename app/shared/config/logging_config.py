# -*- coding: utf-8 -*-
"""
backend/app/shared/config/logging_config.py

Configuración centralizada de logging para el servicio de checkout.

- plain/pretty: una línea legible por evento (desarrollo, tests)
- json: un objeto por evento con `service` fijo, listo para el agregador

Los módulos del motor registran eventos con estilo clave=valor
(`checkout.payment.settled transaction_id=... outcome=...`), así que el
mensaje se conserva tal cual en ambos formatos.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

import logging.config
from typing import Literal, Mapping, Optional

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Loggers de terceros demasiado verbosos en DEBUG
_NOISY_LOGGERS = ("apscheduler", "httpx", "asyncio")

# Nombres de campo estables en JSON
_JSON_RENAMES = {"asctime": "timestamp", "levelname": "level", "name": "logger"}


def build_logging_config(
    level: LogLevel = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
    service: str = "checkout-engine",
    overrides: Optional[Mapping[str, str]] = None,
) -> dict:
    """
    Arma el diccionario para logging.config.dictConfig.

    Args:
        level: Nivel del root logger
        fmt: plain | pretty | json (pretty se trata como plain)
        service: Valor fijo del campo `service` en modo json
        overrides: Niveles por logger, p. ej. {"app.modules.checkout": "DEBUG"}
    """
    use_json = fmt == "json"

    loggers = {name: {"level": "WARNING"} for name in _NOISY_LOGGERS}
    for name, logger_level in (overrides or {}).items():
        loggers[name] = {"level": logger_level.upper()}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s [%(name)s]: %(message)s",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(name)s %(levelname)s %(message)s",
                "rename_fields": dict(_JSON_RENAMES),
                "static_fields": {"service": service},
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if use_json else "default",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": loggers,
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    }


def setup_logging(
    level: LogLevel = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
    service: str = "checkout-engine",
    overrides: Optional[Mapping[str, str]] = None,
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json", service="checkout-engine")
    """
    logging.config.dictConfig(build_logging_config(level, fmt, service, overrides))


__all__ = ["build_logging_config", "setup_logging"]
# Fin del archivo backend/app/shared/config/logging_config.py
