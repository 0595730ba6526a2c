# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests del servicio de checkout.

- Fuerza PYTHON_ENV=test ANTES de importar la app (scheduler apagado,
  logging en WARNING).
- App FastAPI y cliente httpx con ciclo de vida (asgi-lifespan).
- Aísla el motor global de checkout entre tests.
"""

import os
import sys
import pathlib
from collections.abc import AsyncIterator

import pytest

# -----------------------------------------------------------------------------
# 0) Entorno de pruebas
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("SCHEDULER_ENABLED", "false")
os.environ.setdefault("CORS_ORIGINS", "*")

# -----------------------------------------------------------------------------
# 1) Asegura .../backend en sys.path
# -----------------------------------------------------------------------------
BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))
assert (BACKEND_ROOT / "app").exists(), f"'app' no existe en {BACKEND_ROOT}"

# -----------------------------------------------------------------------------
# 2) App FastAPI y cliente httpx (httpx>=0.28, con ciclo de vida)
# -----------------------------------------------------------------------------
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager


@pytest.fixture(scope="session")
def app():
    """
    Carga la aplicación principal de FastAPI **después** de setear env vars.
    """
    from app.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app con ASGITransport (sin 'lifespan' param)
    y gestión de startup/shutdown mediante asgi-lifespan.
    """
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


# -----------------------------------------------------------------------------
# 3) Aislamiento del motor global de checkout
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_checkout_engine():
    """Cada test arranca sin motor global; los fixtures lo inyectan si hace falta."""
    from app.modules.checkout.dependencies import reset_checkout_engine

    reset_checkout_engine(None)
    yield
    reset_checkout_engine(None)

# Fin del archivo backend/tests/conftest.py
