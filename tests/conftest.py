from __future__ import annotations

import asyncio
import copy
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

SEED_CITIES: list[dict[str, Any]] = [
    {
        "cityName": "Lagos",
        "country": "Nigeria",
        "emoji": "🇳🇬",
        "date": "2027-06-11T08:30:00.000Z",
        "notes": "Jollof rice at the market",
        "position": {"lat": 6.5244, "lng": 3.3792},
        "id": 1,
    },
    {
        "cityName": "Paris",
        "country": "France",
        "emoji": "🇫🇷",
        "date": "2027-07-14T21:00:00.000Z",
        "notes": "",
        "position": {"lat": 48.8566, "lng": 2.3522},
        "id": 2,
    },
]


@dataclass
class FakeCitiesBackend:
    """In-process stand-in for a json-server ``/cities`` resource."""

    cities: list[dict[str, Any]] = field(default_factory=lambda: copy.deepcopy(SEED_CITIES))
    calls: dict[str, int] = field(default_factory=dict)
    next_id: int = 100
    force_status: int | None = None
    force_body: str | bytes | None = None
    delay: float = 0.0
    last_post: dict[str, Any] | None = None
    last_headers: dict[str, str] = field(default_factory=dict)

    def _record_call(self, request: web.Request) -> None:
        route = request.match_info.route.resource
        path = route.canonical if route is not None else request.path
        key = f"{request.method} {path}"
        self.calls[key] = self.calls.get(key, 0) + 1
        self.last_headers = {k.lower(): v for k, v in request.headers.items()}

    def _find(self, raw_id: str) -> dict[str, Any] | None:
        for city in self.cities:
            if str(city["id"]) == raw_id:
                return city
        return None

    @web.middleware
    async def _middleware(self, request: web.Request, handler: Any) -> web.StreamResponse:
        self._record_call(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.force_status is not None or self.force_body is not None:
            body = self.force_body if self.force_body is not None else "{}"
            if isinstance(body, str):
                body = body.encode("utf-8")
            return web.Response(
                status=self.force_status or 200,
                body=body,
                content_type="application/json",
            )
        response: web.StreamResponse = await handler(request)
        return response

    async def _list(self, _request: web.Request) -> web.Response:
        return web.json_response(self.cities)

    async def _get(self, request: web.Request) -> web.Response:
        city = self._find(request.match_info["city_id"])
        if city is None:
            return web.json_response({}, status=404)
        return web.json_response(city)

    async def _post(self, request: web.Request) -> web.Response:
        body = await request.json()
        self.last_post = body
        if not body.get("cityName"):
            return web.json_response({"error": "cityName is required"}, status=422)
        city = dict(body, id=self.next_id)
        self.next_id += 1
        self.cities.append(city)
        return web.json_response(city, status=201)

    async def _delete(self, request: web.Request) -> web.Response:
        city = self._find(request.match_info["city_id"])
        if city is None:
            return web.json_response({}, status=404)
        self.cities.remove(city)
        return web.json_response({})

    def app(self) -> web.Application:
        application = web.Application(middlewares=[self._middleware])
        application.router.add_get("/cities", self._list)
        application.router.add_get("/cities/{city_id}", self._get)
        application.router.add_post("/cities", self._post)
        application.router.add_delete("/cities/{city_id}", self._delete)
        return application


@pytest.fixture
def backend() -> FakeCitiesBackend:
    return FakeCitiesBackend()


@pytest_asyncio.fixture
async def base_url(backend: FakeCitiesBackend) -> AsyncIterator[str]:
    server = TestServer(backend.app())
    await server.start_server()
    try:
        yield f"http://{server.host}:{server.port}"
    finally:
        await server.close()
