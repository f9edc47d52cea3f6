"""
Zone settings.
"""
from .api import ZoneSettingsApi
from .models import (
    ZoneSettingId,
    SslMode,
    ZoneSecurityLevel,
    Tls13Setting,
    CacheLevel,
    PolishSetting,
    PseudoIpv4Setting,
    ZoneSetting,
    UpdateZoneSettingRequest,
)

__all__ = [
    "ZoneSettingsApi",
    "ZoneSettingId",
    "SslMode",
    "ZoneSecurityLevel",
    "Tls13Setting",
    "CacheLevel",
    "PolishSetting",
    "PseudoIpv4Setting",
    "ZoneSetting",
    "UpdateZoneSettingRequest",
]
