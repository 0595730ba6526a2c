# -*- coding: utf-8 -*-
"""
backend/tests/observability/test_prom.py

Tests de la instrumentación Prometheus de la capa HTTP.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from http import HTTPStatus
from types import SimpleNamespace

import pytest

from app.observability.prom import UNMATCHED_PATH, route_label, status_class


@pytest.mark.parametrize("code, expected", [(200, "2xx"), (201, "2xx"), (404, "4xx"), (410, "4xx"), (500, "5xx")])
def test_status_class(code, expected):
    assert status_class(code) == expected


def test_route_label_prefers_template():
    request = SimpleNamespace(scope={"route": SimpleNamespace(path="/checkout/payment/{transaction_id}/status")})
    assert route_label(request) == "/checkout/payment/{transaction_id}/status"


def test_route_label_without_route():
    assert route_label(SimpleNamespace(scope={})) == UNMATCHED_PATH


@pytest.mark.asyncio
async def test_unknown_urls_share_one_label(async_client):
    await async_client.get("/definitely/not/a/route-9f3a")

    resp = await async_client.get("/metrics")

    assert resp.status_code == HTTPStatus.OK
    assert 'path="<unmatched>"' in resp.text
    assert "route-9f3a" not in resp.text


@pytest.mark.asyncio
async def test_scrape_endpoints_are_not_instrumented(async_client):
    await async_client.get("/metrics")

    resp = await async_client.get("/metrics")

    assert 'path="/metrics"' not in resp.text
# Fin del archivo backend/tests/observability/test_prom.py
