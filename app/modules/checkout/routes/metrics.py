# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/routes/metrics.py

Endpoint Prometheus con las métricas de negocio del motor de checkout.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from fastapi import APIRouter
from starlette.responses import Response

from app.modules.checkout.metrics import export_metrics

router = APIRouter(tags=["checkout:metrics"])


@router.get("/metrics", include_in_schema=False)
def checkout_metrics():
    data, content_type = export_metrics()
    return Response(content=data, media_type=content_type)


__all__ = ["router"]

# Fin del archivo backend/app/modules/checkout/routes/metrics.py
