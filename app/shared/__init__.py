# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida del servicio: configuración, logging,
middlewares, scheduler y utilidades de tareas asíncronas.

No inicializa settings en import-time para evitar efectos colaterales
durante la recolección de tests.
"""

# Fin del archivo backend/app/shared/__init__.py
