"""
Tests for ZoneSettingsApi.
"""
import json

import pytest
import respx

from cloudflare_client.client import CloudflareClient
from cloudflare_client.core.json_types import JsonDocument
from cloudflare_client.errors import CloudflareApiError
from cloudflare_client.zones.models import SslMode, ZoneSettingId


@pytest.mark.asyncio
async def test_get_scalar_setting(config, base_url, envelope):
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            mock.get("/zones/z1/settings/always_use_https").respond(200, json=envelope({
                "id": "always_use_https",
                "value": "on",
                "editable": True,
                "modified_on": "2024-02-10T09:00:00Z",
            }))

            setting = await cf.zone_settings.get_setting("z1", ZoneSettingId.ALWAYS_USE_HTTPS)

            assert setting.id == ZoneSettingId.ALWAYS_USE_HTTPS
            assert setting.value.get_string() == "on"
            assert setting.editable is True
            assert setting.modified_on.day == 10


@pytest.mark.asyncio
async def test_get_object_setting(config, base_url, envelope):
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            mock.get("/zones/z1/settings/security_header").respond(200, json=envelope({
                "id": "security_header",
                "value": {"strict_transport_security": {"enabled": True, "max_age": 86400}},
            }))

            setting = await cf.zone_settings.get_setting("z1", "security_header")

            hsts = setting.value.get_property("strict_transport_security")
            assert hsts.get_int("max_age") == 86400
            assert not setting.id.is_known
            assert setting.editable is False


@pytest.mark.asyncio
async def test_set_setting_patches_value(config, base_url, envelope):
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            route = mock.patch("/zones/z1/settings/0rtt").respond(
                200, json=envelope({"id": "0rtt", "value": "off", "editable": True})
            )

            setting = await cf.zone_settings.set_setting("z1", ZoneSettingId.ZERO_RTT, "off")

            assert setting.value == "off"
            assert json.loads(route.calls.last.request.content) == {"value": "off"}


@pytest.mark.asyncio
async def test_set_setting_accepts_documents(config, base_url, envelope):
    value = {"enabled": True, "max_age": 300}
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            route = mock.patch("/zones/z1/settings/security_header").respond(
                200, json=envelope({"id": "security_header", "value": value})
            )

            await cf.zone_settings.set_setting("z1", "security_header", JsonDocument(value))

            assert json.loads(route.calls.last.request.content) == {"value": value}


@pytest.mark.asyncio
async def test_read_only_setting_failure(config, base_url, envelope):
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            mock.patch("/zones/z1/settings/ssl").respond(200, json=envelope(
                None, success=False, errors=[{"code": 1007, "message": "Invalid value for zone setting ssl"}]
            ))
            with pytest.raises(CloudflareApiError) as exc:
                await cf.zone_settings.set_setting("z1", ZoneSettingId.SSL, "bogus")
            assert exc.value.codes == [1007]


@pytest.mark.asyncio
async def test_set_setting_with_value_enum(config, base_url, envelope):
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            route = mock.patch("/zones/z1/settings/ssl").respond(
                200, json=envelope({"id": "ssl", "value": "strict", "editable": True})
            )

            setting = await cf.zone_settings.set_setting("z1", ZoneSettingId.SSL, SslMode.STRICT)

            assert SslMode(setting.value.get_string()) is SslMode.STRICT
            assert json.loads(route.calls.last.request.content) == {"value": "strict"}
