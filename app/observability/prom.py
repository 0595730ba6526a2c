# -*- coding: utf-8 -*-
"""
backend/app/observability/prom.py

Observabilidad Prometheus de la capa HTTP del servicio de checkout.

Incluye:
- Middleware que mide peticiones por método, plantilla de ruta y clase de estado
- Gauge de peticiones en vuelo (útil para ver pagos atorados en el gateway)
- Endpoint /metrics (pull model), con soporte multiproceso si se configura

Las métricas del dominio (sesiones, liquidaciones, reembolsos) viven en su
propio registry y se sirven en /checkout/metrics.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""
from __future__ import annotations

import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
    multiprocess,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

# Rutas de scrape/health: no se instrumentan
EXCLUDED_PATHS = frozenset({"/metrics", "/checkout/metrics", "/health"})

# Etiqueta para URLs que no resolvieron a ninguna ruta (404 de router)
UNMATCHED_PATH = "<unmatched>"

# Buckets pensados para handlers en memoria (ms) hasta respuestas lentas (s)
LATENCY_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)

HTTP_REQUESTS = Counter(
    "checkout_http_requests_total",
    "HTTP requests handled by the checkout API",
    ["method", "path", "status"],
)
HTTP_LATENCY = Histogram(
    "checkout_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
    buckets=LATENCY_BUCKETS,
)
HTTP_IN_FLIGHT = Gauge(
    "checkout_http_requests_in_progress",
    "HTTP requests currently being served",
    ["method"],
)


def route_label(request: Request) -> str:
    """
    Plantilla de la ruta resuelta (/checkout/session/{session_id}).

    Nunca devuelve la URL cruda: IDs en la etiqueta disparan la cardinalidad.
    """
    route = request.scope.get("route")
    template = getattr(route, "path", None)
    return template or UNMATCHED_PATH


def status_class(status_code: int) -> str:
    """Agrupa el código HTTP en su clase (2xx, 4xx, 5xx)."""
    return f"{status_code // 100}xx"


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Instrumenta cada petición HTTP de la API."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        method = request.method
        HTTP_IN_FLIGHT.labels(method).inc()
        start = perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            elapsed = perf_counter() - start
            HTTP_IN_FLIGHT.labels(method).dec()
            path = route_label(request)
            HTTP_LATENCY.labels(method, path).observe(elapsed)
            HTTP_REQUESTS.labels(method, path, status_class(status)).inc()


def _multiprocess_registry() -> Optional[CollectorRegistry]:
    """Registry agregado entre workers cuando PROMETHEUS_MULTIPROC_DIR existe."""
    if not os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        return None
    registry = CollectorRegistry()
    multiprocess.MultiProcessCollector(registry)
    return registry


def mount_metrics(app: FastAPI, path: str = "/metrics") -> None:
    """Registra el endpoint de scrape en la app."""
    registry = _multiprocess_registry()

    @app.get(path, include_in_schema=False)
    def metrics() -> Response:
        payload = generate_latest(registry) if registry is not None else generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)


def setup_observability(app: FastAPI, enabled: bool = True) -> None:
    """
    Monta /metrics y, si `enabled`, el middleware de instrumentación.

    Args:
        app: Aplicación FastAPI
        enabled: HTTP_METRICS_ENABLED (apagarlo deja /metrics sin series HTTP)
    """
    if enabled:
        app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)


__all__ = [
    "PrometheusMiddleware",
    "mount_metrics",
    "route_label",
    "setup_observability",
    "status_class",
]
# Fin del archivo backend/app/observability/prom.py
