# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/tasks/__init__.py

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from .deferred_queue import DeferredJob, DeferredTaskQueue

__all__ = ["DeferredJob", "DeferredTaskQueue"]
