# -*- coding: utf-8 -*-
import os
import pytest

@pytest.fixture(autouse=True)
def _isolate_env_and_cache(monkeypatch):
    """
    Aísla variables de entorno y limpia el caché de get_settings() en cada test.
    """
    # Asegura que no heredamos configuración del shell del dev
    for k in list(os.environ.keys()):
        if k.startswith(("CHECKOUT_", "CORS_", "APP_", "LOG_", "HTTP_", "SCHEDULER_", "DEBUG")):
            monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("PYTHON_ENV", "development")

    from app.shared.config.config_loader import get_settings
    from app.shared.config.settings_checkout import reset_checkout_settings

    get_settings.cache_clear()
    reset_checkout_settings()

    yield

    # Limpieza final: el siguiente acceso reconstruye con el entorno restaurado
    get_settings.cache_clear()
    reset_checkout_settings()
# Fin del archivo backend/tests/shared/config/conftest.py
