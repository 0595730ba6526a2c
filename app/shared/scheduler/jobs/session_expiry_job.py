# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/jobs/session_expiry_job.py

Job programado para marcar como expiradas las sesiones de checkout vencidas.

La expiración ya se evalúa de forma perezosa al leer una sesión; este
barrido solo mantiene el store coherente para sesiones que nadie vuelve
a consultar (housekeeping).

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from app.modules.checkout.dependencies import CheckoutEngine, get_checkout_engine

logger = logging.getLogger(__name__)

SESSION_EXPIRY_JOB_ID = "checkout_session_expiry_sweep"


async def sweep_expired_sessions(
    engine_provider: Callable[[], CheckoutEngine] = get_checkout_engine,
) -> Dict[str, Any]:
    """
    Ejecuta el barrido de expiración sobre el motor global.

    Returns:
        Dict con estadísticas del barrido
    """
    start_time = datetime.now(timezone.utc)

    try:
        engine = engine_provider()
        expired = engine.sessions.expire_stale_sessions()
    except Exception as e:
        logger.error("[session_expiry] error: %s", e, exc_info=True)
        return {
            "timestamp": start_time.isoformat(),
            "error": str(e),
            "expired": 0,
        }

    duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
    result = {
        "timestamp": start_time.isoformat(),
        "expired": expired,
        "total_sessions": engine.sessions.count_sessions(),
        "duration_ms": round(duration_ms, 2),
    }

    log = logger.info if expired else logger.debug
    log(
        "[session_expiry] expired=%d total_sessions=%d duration_ms=%.2f",
        expired,
        result["total_sessions"],
        result["duration_ms"],
    )
    return result


def register_session_expiry_job(scheduler, settings: Optional[Any] = None) -> Optional[str]:
    """
    Registra el barrido de expiración en el scheduler.

    Args:
        scheduler: Instancia de SchedulerService
        settings: CheckoutSettings (usa el singleton si es None)

    Returns:
        ID del job registrado, o None si el barrido está deshabilitado
    """
    if settings is None:
        from app.shared.config.settings_checkout import get_checkout_settings
        settings = get_checkout_settings()

    if not settings.session_sweep_enabled:
        logger.info("[session_expiry] sweep disabled (CHECKOUT_SESSION_SWEEP_ENABLED=false)")
        return None

    scheduler.add_interval_job(
        func=sweep_expired_sessions,
        job_id=SESSION_EXPIRY_JOB_ID,
        seconds=settings.session_sweep_interval_seconds,
    )
    logger.info(
        "[session_expiry] Job '%s' registered: every %ds",
        SESSION_EXPIRY_JOB_ID,
        settings.session_sweep_interval_seconds,
    )
    return SESSION_EXPIRY_JOB_ID


__all__ = ["SESSION_EXPIRY_JOB_ID", "sweep_expired_sessions", "register_session_expiry_job"]

# Fin del archivo backend/app/shared/scheduler/jobs/session_expiry_job.py
