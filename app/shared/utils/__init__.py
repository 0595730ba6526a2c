# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .async_job_registry import AsyncJobRegistry, job_registry

__all__ = ["AsyncJobRegistry", "job_registry"]
