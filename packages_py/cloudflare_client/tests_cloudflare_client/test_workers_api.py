"""
Tests for WorkersApi.
"""
import json

import pytest
import respx

from cloudflare_client.client import CloudflareClient
from cloudflare_client.workers.models import CreateWorkerRouteRequest, UpdateWorkerRouteRequest


@pytest.mark.asyncio
async def test_route_crud(config, base_url, envelope):
    route_body = {"id": "rt1", "pattern": "example.com/api/*", "script": "api-worker"}
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            mock.get("/zones/z1/workers/routes").respond(200, json=envelope([route_body]))
            mock.get("/zones/z1/workers/routes/rt1").respond(200, json=envelope(route_body))
            create = mock.post("/zones/z1/workers/routes").respond(200, json=envelope(route_body))
            update = mock.put("/zones/z1/workers/routes/rt1").respond(200, json=envelope(route_body))
            delete = mock.delete("/zones/z1/workers/routes/rt1").respond(200, json=envelope({"id": "rt1"}))

            routes = await cf.workers.list_routes("z1")
            fetched = await cf.workers.get_route("z1", "rt1")
            await cf.workers.create_route("z1", CreateWorkerRouteRequest(pattern="example.com/api/*"))
            await cf.workers.update_route(
                "z1", "rt1", UpdateWorkerRouteRequest(pattern="example.com/api/*", script="api-worker")
            )
            await cf.workers.delete_route("z1", "rt1")

            assert [r.id for r in routes] == ["rt1"]
            assert fetched.script == "api-worker"
            assert json.loads(create.calls.last.request.content) == {"pattern": "example.com/api/*"}
            assert json.loads(update.calls.last.request.content) == {
                "pattern": "example.com/api/*",
                "script": "api-worker",
            }
            assert delete.called


@pytest.mark.asyncio
async def test_list_routes_empty(config, base_url, envelope):
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            mock.get("/zones/z1/workers/routes").respond(200, json=envelope(None))
            assert await cf.workers.list_routes("z1") == []
