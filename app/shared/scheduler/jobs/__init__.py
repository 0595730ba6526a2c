# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/jobs/__init__.py

Jobs programados del sistema.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .session_expiry_job import (
    SESSION_EXPIRY_JOB_ID,
    register_session_expiry_job,
    sweep_expired_sessions,
)

__all__ = [
    "SESSION_EXPIRY_JOB_ID",
    "register_session_expiry_job",
    "sweep_expired_sessions",
]
