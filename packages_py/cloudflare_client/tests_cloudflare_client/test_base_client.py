"""
Tests for BaseClient.
"""
import json

import httpx
import pytest
import respx

from cloudflare_client.config import ClientConfig
from cloudflare_client.core.base_client import BaseClient, _format_body


@pytest.mark.asyncio
async def test_base_client_lifecycle(config):
    async with BaseClient(config) as client:
        assert client._client is not None
        # Should be open
        assert not client._client.is_closed

    # Should be closed after exit
    assert client._client is None  # Reference cleared


@pytest.mark.asyncio
async def test_external_client_is_not_closed(base_url):
    external = httpx.AsyncClient(base_url=base_url + "/")
    config = ClientConfig(base_url=base_url, api_token="t", httpx_client=external)
    async with BaseClient(config):
        pass
    assert not external.is_closed
    await external.aclose()


@pytest.mark.asyncio
async def test_base_client_request_simple(config, base_url):
    async with BaseClient(config) as client:
        with respx.mock(base_url=base_url) as mock:
            mock.get("/user").respond(200, json={"success": True, "result": {"id": "u1"}})

            response = await client.request({"method": "GET", "url": "user"})

            assert response.status == 200
            assert json.loads(response.text)["result"] == {"id": "u1"}
            assert response.is_success
            assert response.method == "GET"


@pytest.mark.asyncio
async def test_base_client_bearer_injection(config, base_url):
    async with BaseClient(config) as client:
        with respx.mock(base_url=base_url) as mock:
            route = mock.get("/user").respond(200, json={"success": True})

            await client.request({"method": "GET", "url": "user"})

            # Verify header was sent
            request = route.calls.last.request
            assert request.headers["Authorization"] == "Bearer test-token-123456"
            assert request.headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_token_callback_wins_over_static_token(base_url):
    seen = []

    def provider(context):
        seen.append(context["method"])
        return "dynamic-token"

    config = ClientConfig(base_url=base_url, api_token="static-token", get_token_for_request=provider)
    async with BaseClient(config) as client:
        with respx.mock(base_url=base_url) as mock:
            route = mock.delete("/zones/z1").respond(200, json={"success": True})
            await client.request({"method": "DELETE", "url": "zones/z1"})

            assert route.calls.last.request.headers["Authorization"] == "Bearer dynamic-token"
            assert seen == ["DELETE"]


@pytest.mark.asyncio
async def test_no_token_sends_no_authorization(base_url):
    async with BaseClient(ClientConfig(base_url=base_url)) as client:
        with respx.mock(base_url=base_url) as mock:
            route = mock.get("/user").respond(200, json={"success": True})
            await client.request({"method": "GET", "url": "user"})
            assert "Authorization" not in route.calls.last.request.headers


@pytest.mark.asyncio
async def test_json_body_and_query(config, base_url):
    async with BaseClient(config) as client:
        with respx.mock(base_url=base_url) as mock:
            route = mock.post("/zones/z1/dns_records").respond(200, json={"success": True})

            await client.request({
                "method": "POST",
                "url": "zones/z1/dns_records",
                "query": [("tag", "a"), ("tag", "b")],
                "json": {"name": "www"},
            })

            request = route.calls.last.request
            assert json.loads(request.content) == {"name": "www"}
            assert request.headers["Content-Type"] == "application/json"
            assert request.url.params.get_list("tag") == ["a", "b"]


@pytest.mark.asyncio
async def test_encoded_path_reaches_the_wire(config, base_url):
    async with BaseClient(config) as client:
        with respx.mock(base_url=base_url, assert_all_called=False) as mock:
            route = mock.route().respond(200, json={"success": True})

            await client.request({"method": "GET", "url": "zones/a%2Fb/dns_records"})

            url = str(route.calls.last.request.url)
            assert url == f"{base_url}/zones/a%2Fb/dns_records"


@pytest.mark.asyncio
async def test_network_error_is_reraised(config, base_url):
    async with BaseClient(config) as client:
        with respx.mock(base_url=base_url) as mock:
            mock.get("/user").mock(side_effect=httpx.ConnectError("boom"))
            with pytest.raises(httpx.ConnectError):
                await client.request({"method": "GET", "url": "user"})


def test_format_body_safety():
    # String
    assert _format_body("hello") == "hello"

    # JSON String
    assert _format_body('{"a": 1}') == '{\n  "a": 1\n}'

    # Binary
    assert _format_body(b"1234") == "<binary data: 4 bytes>"

    # Truncation
    long_str = "a" * 6000
    formatted = _format_body(long_str)
    assert len(formatted) < 6000
    assert "... (truncated)" in formatted

    assert _format_body(None) == "<empty>"
