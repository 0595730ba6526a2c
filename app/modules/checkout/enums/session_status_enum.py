# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/session_status_enum.py

Enum de estados de la sesión de checkout y su tabla de transiciones.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from enum import StrEnum


class SessionStatus(StrEnum):
    """Estado de la sesión de checkout."""

    INITIALIZED = "initialized"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        return not SESSION_TRANSITIONS[self]

    def can_transition_to(self, target: "SessionStatus") -> bool:
        return target in SESSION_TRANSITIONS[self]


SESSION_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.INITIALIZED: frozenset({SessionStatus.PROCESSING, SessionStatus.EXPIRED}),
    SessionStatus.PROCESSING: frozenset({SessionStatus.COMPLETED, SessionStatus.FAILED}),
    SessionStatus.COMPLETED: frozenset(),
    SessionStatus.FAILED: frozenset(),
    SessionStatus.EXPIRED: frozenset(),
}


__all__ = ["SessionStatus", "SESSION_TRANSITIONS"]

# Fin del archivo backend/app/modules/checkout/enums/session_status_enum.py
