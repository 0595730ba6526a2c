# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/async_job_registry.py

Registry global para mantener referencias de asyncio.Task activos
(liquidaciones diferidas de pagos y reembolsos).
Permite cancelación ordenada durante shutdown y previene que el
recolector de basura descarte tasks aún pendientes.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

import asyncio
import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class AsyncJobRegistry:
    """Registry thread-safe para mantener referencias de asyncio.Task activos."""

    def __init__(self):
        self._lock = threading.Lock()
        self._active_tasks: Dict[str, asyncio.Task] = {}

    def register_task(self, job_id: str, task: asyncio.Task) -> None:
        """Registra una task activa por job_id."""
        with self._lock:
            self._active_tasks[job_id] = task
        logger.debug("📝 Task registrada: job_id=%s task_id=%s", job_id, id(task))

    def unregister_task(self, job_id: str) -> None:
        """Desregistra una task por job_id."""
        with self._lock:
            task = self._active_tasks.pop(job_id, None)
        if task:
            logger.debug("🗑️ Task desregistrada: job_id=%s task_id=%s", job_id, id(task))

    def get_task(self, job_id: str) -> Optional[asyncio.Task]:
        """Obtiene la task activa por job_id."""
        with self._lock:
            return self._active_tasks.get(job_id)

    def cancel_task(self, job_id: str) -> bool:
        """Cancela una task específica por job_id."""
        with self._lock:
            task = self._active_tasks.pop(job_id, None)
        if task and not task.done():
            task.cancel()
            logger.debug("❌ Task cancelada: job_id=%s", job_id)
            return True
        return False

    def get_active_count(self) -> int:
        """Retorna el número de tasks activas."""
        with self._lock:
            return len([t for t in self._active_tasks.values() if not t.done()])

    async def cancel_all_tasks(self, timeout: float = 30.0) -> None:
        """
        Cancela todas las tasks activas y espera a que terminen.

        Args:
            timeout: Tiempo máximo de espera en segundos
        """
        with self._lock:
            active_tasks = [t for t in self._active_tasks.values() if not t.done()]
            self._active_tasks.clear()

        if not active_tasks:
            logger.info("🟢 No hay tasks activas para cancelar")
            return

        logger.info("🔄 Cancelando %d tasks activas...", len(active_tasks))

        for task in active_tasks:
            task.cancel()

        try:
            await asyncio.wait_for(
                asyncio.gather(*active_tasks, return_exceptions=True),
                timeout=timeout
            )
            logger.info("✅ Todas las tasks canceladas exitosamente")
        except asyncio.TimeoutError:
            logger.warning("⚠️ Timeout esperando cancelación de tasks (%ss)", timeout)


# Instance global
job_registry = AsyncJobRegistry()

__all__ = ["AsyncJobRegistry", "job_registry"]
# Fin del archivo backend/app/shared/utils/async_job_registry.py
