"""
Zone setting models.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from ..core.json_types import JsonDocument, Timestamp
from ..core.models import CloudflareModel
from ..core.open_enum import OpenEnum


class ZoneSettingId(OpenEnum):
    # Security
    ADVANCED_DDOS = "advanced_ddos"
    AEGIS = "aegis"
    ALWAYS_USE_HTTPS = "always_use_https"
    AUTOMATIC_HTTPS_REWRITES = "automatic_https_rewrites"
    BROWSER_CHECK = "browser_check"
    CHALLENGE_TTL = "challenge_ttl"
    CIPHERS = "ciphers"
    EMAIL_OBFUSCATION = "email_obfuscation"
    MIN_TLS_VERSION = "min_tls_version"
    OPPORTUNISTIC_ENCRYPTION = "opportunistic_encryption"
    OPPORTUNISTIC_ONION = "opportunistic_onion"
    SECURITY_LEVEL = "security_level"
    SECURITY_HEADERS = "security_headers"
    SERVER_SIDE_EXCLUDES = "server_side_excludes"
    SSL = "ssl"
    SSL_RECOMMENDER = "ssl_recommender"
    TLS_1_3 = "tls_1_3"
    TLS_CLIENT_AUTH = "tls_client_auth"
    TRUE_CLIENT_IP_HEADER = "true_client_ip_header"
    WAF = "waf"
    # Performance
    ALWAYS_ONLINE = "always_online"
    AUTOMATIC_PLATFORM_OPTIMIZATION = "automatic_platform_optimization"
    BROTLI = "brotli"
    BROWSER_CACHE_TTL = "browser_cache_ttl"
    CACHE_LEVEL = "cache_level"
    DEVELOPMENT_MODE = "development_mode"
    EARLY_HINTS = "early_hints"
    FONT_SETTINGS = "font_settings"
    H2_PRIORITIZATION = "h2_prioritization"
    HOTLINK_PROTECTION = "hotlink_protection"
    HTTP2 = "http2"
    HTTP3 = "http3"
    IMAGE_RESIZING = "image_resizing"
    MIRAGE = "mirage"
    POLISH = "polish"
    PREFETCH_PRELOAD = "prefetch_preload"
    ROCKET_LOADER = "rocket_loader"
    SORT_QUERY_STRING_FOR_CACHE = "sort_query_string_for_cache"
    WEBP = "webp"
    ZERO_RTT = "0rtt"
    # Network
    IP_GEOLOCATION = "ip_geolocation"
    IPV6 = "ipv6"
    NEL = "nel"
    ORANGE_TO_ORANGE = "orange_to_orange"
    ORIGIN_ERROR_PAGE_PASS_THRU = "origin_error_page_pass_thru"
    ORIGIN_MAX_HTTP_VERSION = "origin_max_http_version"
    PROXY_READ_TIMEOUT = "proxy_read_timeout"
    PSEUDO_IPV4 = "pseudo_ipv4"
    RESPONSE_BUFFERING = "response_buffering"
    WEBSOCKETS = "websockets"


# Values accepted by specific settings

class SslMode(str, Enum):
    OFF = "off"
    FLEXIBLE = "flexible"
    FULL = "full"
    STRICT = "strict"


class ZoneSecurityLevel(str, Enum):
    OFF = "off"
    ESSENTIALLY_OFF = "essentially_off"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNDER_ATTACK = "under_attack"


class Tls13Setting(str, Enum):
    OFF = "off"
    ON = "on"
    ZERO_RTT = "zrt"


class CacheLevel(str, Enum):
    BYPASS = "bypass"
    BASIC = "basic"
    SIMPLIFIED = "simplified"
    AGGRESSIVE = "aggressive"
    CACHE_EVERYTHING = "cache_everything"


class PolishSetting(str, Enum):
    OFF = "off"
    LOSSLESS = "lossless"
    LOSSY = "lossy"


class PseudoIpv4Setting(str, Enum):
    OFF = "off"
    ADD_HEADER = "add_header"
    OVERWRITE_HEADER = "overwrite_header"


class ZoneSetting(CloudflareModel):
    """A zone setting. ``value`` varies by setting (string, number or object)."""
    id: ZoneSettingId
    value: JsonDocument = Field(default_factory=lambda: JsonDocument(None))
    editable: bool = False
    modified_on: Optional[Timestamp] = None


class UpdateZoneSettingRequest(CloudflareModel):
    value: Any
