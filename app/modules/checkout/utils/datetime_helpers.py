# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/utils/datetime_helpers.py

Utilidades para manejo consistente de timestamps UTC.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from datetime import datetime, timezone
from typing import Callable, Optional


Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """
    Retorna el timestamp UTC actual (timezone-aware).

    Examples:
        >>> now = utcnow()
        >>> now.tzinfo == timezone.utc
        True
    """
    return datetime.now(timezone.utc)


def to_iso8601(dt: Optional[datetime]) -> Optional[str]:
    """
    Convierte datetime a string ISO 8601 con 'Z' para UTC.

    Examples:
        >>> to_iso8601(datetime(2026, 10, 19, 14, 30, 0, tzinfo=timezone.utc))
        '2026-10-19T14:30:00Z'
    """
    if dt is None:
        return None
    return dt.isoformat().replace('+00:00', 'Z')


def epoch_millis(dt: datetime) -> int:
    """Milisegundos desde epoch (para códigos de autorización)."""
    return int(dt.timestamp() * 1000)


__all__ = ["Clock", "utcnow", "to_iso8601", "epoch_millis"]
# Fin del archivo backend/app/modules/checkout/utils/datetime_helpers.py
