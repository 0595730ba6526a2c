# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/__init__.py

Motor de checkout y transacciones de pago.

Este módulo gestiona:
- Sesiones de checkout con precio congelado y vida limitada (TTL)
- Transacciones de pago con liquidación asíncrona
- Reembolsos contra transacciones completadas
- Consultas de métodos de pago y cotización de envío

Estructura:
- enums: estados, métodos de pago, monedas
- models: registros en memoria (dataclasses versionadas)
- repositories: contrato de store + implementaciones en memoria
- services: lógica de negocio
- adapters: gateway de liquidación
- tasks: cola de trabajo diferido
- schemas / routes: API HTTP

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

# Fin del archivo backend/app/modules/checkout/__init__.py
