"""
Zone settings API (``zones/{zone_id}/settings/{setting_id}``).
"""
from typing import Any, Union

from ..core.json_types import JsonDocument
from ..core.request import RequestBuilder
from ..core.validation import require_not_blank
from ..resources import ApiResource
from .models import UpdateZoneSettingRequest, ZoneSetting, ZoneSettingId

SETTING = "zones/{zone_id}/settings/{setting_id}"


class ZoneSettingsApi(ApiResource):

    async def get_setting(self, zone_id: str, setting_id: Union[ZoneSettingId, str]) -> ZoneSetting:
        require_not_blank(zone_id, "zone_id")
        require_not_blank(setting_id, "setting_id")
        builder = RequestBuilder.for_path("GET", SETTING, zone_id=zone_id, setting_id=setting_id)
        return await self._execute(builder, ZoneSetting)

    async def set_setting(self, zone_id: str, setting_id: Union[ZoneSettingId, str], value: Any) -> ZoneSetting:
        """
        Set a zone setting's value (PATCH ``{"value": ...}``).

        ``value`` may be any JSON-serializable value, a pydantic model or a
        JsonDocument.
        """
        require_not_blank(zone_id, "zone_id")
        require_not_blank(setting_id, "setting_id")
        if isinstance(value, JsonDocument):
            value = value.raw
        builder = (
            RequestBuilder.for_path("PATCH", SETTING, zone_id=zone_id, setting_id=setting_id)
            .json(UpdateZoneSettingRequest(value=value))
        )
        return await self._execute(builder, ZoneSetting)
