# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/scheduler_service.py

Servicio de programación de tareas periódicas usando APScheduler.
Hoy aloja el barrido de sesiones de checkout vencidas; cualquier job
de mantenimiento nuevo se registra aquí vía add_interval_job.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

import logging
from typing import Optional, Callable
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.executors.asyncio import AsyncIOExecutor

logger = logging.getLogger(__name__)


class SchedulerService:
    """
    Servicio de programación de tareas periódicas.

    - Jobs a intervalos regulares (una instancia por job, coalesce)
    - Registro y eliminación dinámica de jobs
    - Consulta de estado para health/diagnóstico
    """

    def __init__(self):
        job_defaults = {
            'coalesce': True,  # Combinar ejecuciones perdidas
            'max_instances': 1,  # Una instancia por job
            'misfire_grace_time': 30  # Tolerar 30s de retraso
        }

        self._scheduler = AsyncIOScheduler(
            jobstores={'default': MemoryJobStore()},
            executors={'default': AsyncIOExecutor()},
            job_defaults=job_defaults,
            timezone='UTC'
        )
        self._started = False
        logger.debug("SchedulerService inicializado")

    def start(self):
        """Inicia el scheduler (requiere event loop activo)."""
        if not self._started:
            self._scheduler.start()
            self._started = True
            logger.info("SchedulerService iniciado")

    def shutdown(self, wait: bool = True):
        """
        Detiene el scheduler.

        Args:
            wait: Si True, espera a que terminen los jobs en ejecución
        """
        if self._started:
            self._scheduler.shutdown(wait=wait)
            self._started = False
            logger.info("SchedulerService detenido")

    def add_interval_job(
        self,
        func: Callable,
        job_id: str,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        **kwargs
    ) -> str:
        """
        Agrega (o reemplaza) un job que se ejecuta a intervalos regulares.

        Args:
            func: Función (sync o async) a ejecutar
            job_id: ID único del job
            hours / minutes / seconds: Intervalo
            **kwargs: Argumentos adicionales para func

        Returns:
            ID del job agregado
        """
        if hours <= 0 and minutes <= 0 and seconds <= 0:
            raise ValueError("interval must be > 0")

        trigger = IntervalTrigger(hours=hours, minutes=minutes, seconds=seconds)

        self._scheduler.add_job(
            func=func,
            trigger=trigger,
            id=job_id,
            name=job_id,
            replace_existing=True,
            kwargs=kwargs
        )

        logger.info(
            "Job '%s' agregado: cada %dh %dm %ds", job_id, hours, minutes, seconds
        )
        return job_id

    def remove_job(self, job_id: str) -> bool:
        """
        Elimina un job programado.

        Returns:
            True si se eliminó, False si no existía
        """
        if self._scheduler.get_job(job_id) is None:
            logger.warning("No se pudo eliminar job '%s': no existe", job_id)
            return False
        self._scheduler.remove_job(job_id)
        logger.info("Job '%s' eliminado", job_id)
        return True

    def get_jobs(self) -> list:
        """Lista de jobs programados con información básica."""
        return [
            {
                'id': job.id,
                'name': job.name,
                'next_run': getattr(job, "next_run_time", None),
                'trigger': str(job.trigger),
            }
            for job in self._scheduler.get_jobs()
        ]

    def get_job_status(self, job_id: str) -> Optional[dict]:
        """Estado de un job específico o None si no existe."""
        job = self._scheduler.get_job(job_id)
        if job is None:
            return None
        return {
            'id': job.id,
            'name': job.name,
            'next_run': getattr(job, "next_run_time", None),
            'trigger': str(job.trigger),
            'pending': job.pending,
        }

    @property
    def is_running(self) -> bool:
        """Retorna True si el scheduler está activo."""
        return self._started and self._scheduler.running


# Singleton global del scheduler
_scheduler_instance: Optional[SchedulerService] = None


def get_scheduler() -> SchedulerService:
    """Obtiene la instancia global del scheduler (singleton)."""
    global _scheduler_instance
    if _scheduler_instance is None:
        _scheduler_instance = SchedulerService()
    return _scheduler_instance


def reset_scheduler() -> None:
    """Detiene y descarta el singleton (lifespan repetido en tests)."""
    global _scheduler_instance
    if _scheduler_instance is not None:
        _scheduler_instance.shutdown(wait=False)
    _scheduler_instance = None


__all__ = ["SchedulerService", "get_scheduler", "reset_scheduler"]
# Fin del archivo backend/app/shared/scheduler/scheduler_service.py
