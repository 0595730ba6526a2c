# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del servicio de checkout.

Ajustes clave:
- Uso de app.core.settings como fachada de configuración.
- Montaje de observabilidad Prometheus (/metrics) vía app.observability.prom
- Scheduler con job de expiración de sesiones (checkout_session_expiry_sweep)
- Ciclo de vida con cierre ordenado: las liquidaciones pendientes se
  ejecutan (no se cancelan) antes de apagar
- Health principal /health delegado al paquete app.routes (health_routes.py)

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea configuración
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV == "development")

import anyio
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.logging import configure_logging
from app.core.settings import get_settings
from app.modules.checkout.dependencies import get_checkout_engine
from app.observability.prom import setup_observability
from app.shared.middleware import JSONExceptionMiddleware

_settings = get_settings()
configure_logging(_settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()
    engine = get_checkout_engine()

    scheduler = None
    if settings.scheduler_enabled:
        from app.shared.scheduler import get_scheduler
        from app.shared.scheduler.jobs import register_session_expiry_job

        scheduler = get_scheduler()
        register_session_expiry_job(scheduler, engine.settings)
        scheduler.start()
        logger.info("⏰ Scheduler iniciado con jobs programados")
    else:
        logger.info("⏰ Scheduler deshabilitado (SCHEDULER_ENABLED=false)")

    logger.info("🟢 Servicio de checkout iniciado (env=%s)", settings.python_env)

    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        logger.info("🔴 Iniciando shutdown ordenado...")
        with anyio.CancelScope(shield=True):
            if scheduler is not None:
                scheduler.shutdown(wait=False)
                logger.info("⏰ Scheduler detenido")

            # Liquidaciones en vuelo: se ejecutan, nunca se descartan
            drained = await engine.queue.shutdown()
            logger.info("💳 Cola diferida vaciada (ejecutados=%d)", drained)
        logger.info("🔴 Servicio de checkout apagado.")


openapi_tags = [
    {"name": "checkout:sessions", "description": "Sesiones de checkout con precio congelado"},
    {"name": "checkout:payments", "description": "Envío de pago y estado de transacción"},
    {"name": "checkout:refunds", "description": "Reembolsos de transacciones completadas"},
    {"name": "checkout:catalog", "description": "Métodos de pago y cotización de envío"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Checkout Engine API",
        description="Sesiones de checkout, transacciones de pago y reembolsos",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
    )

    # IMPORTANTE: el orden real de ejecución de middlewares en Starlette es inverso al registro.
    # JSONExceptionMiddleware queda por dentro de métricas y CORS.
    app.add_middleware(JSONExceptionMiddleware)
    setup_observability(app, enabled=settings.http_metrics_enabled)

    origins = settings.get_cors_origins()
    is_wildcard_only = origins == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # "*" con allow_credentials=True es inválido en navegadores
        allow_credentials=not is_wildcard_only,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            content={"detail": exc.detail},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    # Incluye router maestro
    from app.routes import router as main_router
    app.include_router(main_router)

    @app.get("/")
    async def root():
        return {"service": settings.app_name, "status": "active"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=_settings.app_host,
        port=_settings.app_port,
        reload=_settings.is_dev,
    )

# Fin del archivo backend/app/main.py
