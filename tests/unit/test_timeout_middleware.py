"""Request timeout middleware: 504 on overrun, exempt routes run to completion."""

import asyncio

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.main import UNBOUNDED_ROUTE_SUFFIXES
from app.middleware.timeout import TimeoutMiddleware


def _slow_app() -> FastAPI:
    inner = FastAPI()

    @inner.get("/slow")
    async def slow() -> dict:
        await asyncio.sleep(0.5)
        return {"done": True}

    @inner.post("/apps/{app_id}/notify-early-access")
    async def notify(app_id: str) -> dict:
        await asyncio.sleep(0.5)
        return {"app_id": app_id}

    return inner


async def _client(timeout: float) -> AsyncClient:
    wrapped = TimeoutMiddleware(
        _slow_app(), timeout_seconds=timeout, exempt_path_suffixes=UNBOUNDED_ROUTE_SUFFIXES
    )
    return AsyncClient(transport=ASGITransport(app=wrapped), base_url="http://test")


async def test_overrun_answers_504() -> None:
    async with await _client(0.1) as client:
        response = await client.get("/slow")
    assert response.status_code == 504
    assert response.json()["error"] == "GATEWAY_TIMEOUT"


async def test_notify_route_is_not_cut_off() -> None:
    async with await _client(0.1) as client:
        response = await client.post("/apps/app1/notify-early-access")
    assert response.status_code == 200
    assert response.json() == {"app_id": "app1"}


async def test_fast_requests_pass_through() -> None:
    async with await _client(2) as client:
        response = await client.get("/slow")
    assert response.status_code == 200
