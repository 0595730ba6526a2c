# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/tasks/deferred_queue.py

Cola de trabajo diferido para liquidaciones de pagos y reembolsos.

Cada trabajo se registra con un retraso. Si hay un event loop activo al
programarlo, se lanza una asyncio.Task (registrada en job_registry) que
duerme el retraso y luego lo ejecuta en un hilo de trabajo (anyio), fuera
del event loop. Sin event loop (scripts, hilos de trabajo, pruebas) el
trabajo queda pendiente hasta que alguien lo fuerce con run(), run_due()
o drain(); los forzados corren en el hilo que los invoca.

Cada trabajo se ejecuta a lo más una vez: se retira de la cola bajo
candado antes de ejecutarse, sea por el temporizador o por un forzado.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

import anyio.to_thread

from app.shared.utils.async_job_registry import AsyncJobRegistry, job_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeferredJob:
    job_id: str
    func: Callable[[], Any]
    due_at: float
    kind: str = "job"


class DeferredTaskQueue:
    """Cola de trabajos diferidos con hooks síncronos de forzado."""

    def __init__(
        self,
        registry: AsyncJobRegistry = job_registry,
        monotonic: Callable[[], float] = time.monotonic,
        autostart: bool = True,
    ) -> None:
        self._registry = registry
        self._monotonic = monotonic
        self.autostart = autostart
        self._jobs: dict[str, DeferredJob] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------ #
    # Programación
    # ------------------------------------------------------------------ #
    def schedule(
        self,
        job_id: str,
        func: Callable[[], Any],
        delay_seconds: float,
        kind: str = "job",
    ) -> DeferredJob:
        """
        Registra un trabajo para ejecutarse tras delay_seconds.

        Raises:
            ValueError: si job_id ya está pendiente o el retraso es negativo
        """
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")

        job = DeferredJob(
            job_id=job_id,
            func=func,
            due_at=self._monotonic() + delay_seconds,
            kind=kind,
        )
        with self._lock:
            if job_id in self._jobs:
                raise ValueError(f"job already scheduled: {job_id}")
            self._jobs[job_id] = job

        logger.debug("deferred.scheduled job_id=%s kind=%s delay=%.3fs", job_id, kind, delay_seconds)

        if self.autostart:
            self._start_timer(job_id, delay_seconds)
        return job

    def _start_timer(self, job_id: str, delay_seconds: float) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Sin loop: queda pendiente hasta run()/run_due()/drain()
            return
        task = loop.create_task(self._run_later(job_id, delay_seconds))
        self._registry.register_task(job_id, task)

    async def _run_later(self, job_id: str, delay_seconds: float) -> None:
        try:
            await asyncio.sleep(delay_seconds)
            job = self._pop(job_id)
            if job is not None:
                # El gateway puede bloquear: fuera del event loop
                await anyio.to_thread.run_sync(self._execute, job)
        finally:
            self._registry.unregister_task(job_id)

    # ------------------------------------------------------------------ #
    # Ejecución
    # ------------------------------------------------------------------ #
    def _pop(self, job_id: str) -> Optional[DeferredJob]:
        with self._lock:
            return self._jobs.pop(job_id, None)

    def _execute(self, job: DeferredJob) -> bool:
        try:
            job.func()
        except Exception:
            logger.exception("deferred.failed job_id=%s kind=%s", job.job_id, job.kind)
            return False
        logger.debug("deferred.done job_id=%s kind=%s", job.job_id, job.kind)
        return True

    def run(self, job_id: str) -> bool:
        """
        Ejecuta YA un trabajo pendiente (force-settle).

        Returns:
            True si el trabajo estaba pendiente y se ejecutó, False si ya
            había corrido o no existe.
        """
        job = self._pop(job_id)
        if job is None:
            return False
        self._registry.cancel_task(job_id)
        self._execute(job)
        return True

    def run_due(self, now: Optional[float] = None) -> int:
        """Ejecuta los trabajos vencidos (due_at <= now). Devuelve cuántos corrieron."""
        now = self._monotonic() if now is None else now
        with self._lock:
            due = sorted(
                (j for j in self._jobs.values() if j.due_at <= now),
                key=lambda j: j.due_at,
            )
            for job in due:
                del self._jobs[job.job_id]

        for job in due:
            self._registry.cancel_task(job.job_id)
            self._execute(job)
        return len(due)

    def drain(self) -> int:
        """Ejecuta todos los trabajos pendientes en orden de vencimiento."""
        executed = 0
        while True:
            with self._lock:
                if not self._jobs:
                    return executed
                job = min(self._jobs.values(), key=lambda j: j.due_at)
                del self._jobs[job.job_id]
            self._registry.cancel_task(job.job_id)
            self._execute(job)
            executed += 1

    # ------------------------------------------------------------------ #
    # Introspección / ciclo de vida
    # ------------------------------------------------------------------ #
    def pending_jobs(self) -> list[str]:
        with self._lock:
            return [j.job_id for j in sorted(self._jobs.values(), key=lambda j: j.due_at)]

    def pending_count(self) -> int:
        with self._lock:
            return len(self._jobs)

    def is_pending(self, job_id: str) -> bool:
        with self._lock:
            return job_id in self._jobs

    async def shutdown(self) -> int:
        """
        Cierre ordenado: ejecuta lo pendiente (no se pierden liquidaciones)
        y luego cancela los temporizadores que quedaron dormidos.
        """
        executed = self.drain()
        if executed:
            logger.info("deferred.shutdown drained=%d", executed)
        await self._registry.cancel_all_tasks(timeout=5.0)
        return executed


__all__ = ["DeferredJob", "DeferredTaskQueue"]

# Fin del archivo backend/app/modules/checkout/tasks/deferred_queue.py
