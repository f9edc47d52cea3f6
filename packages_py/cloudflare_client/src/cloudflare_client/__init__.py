"""
Cloudflare Client - async client for the Cloudflare v4 REST API
"""

from .client import CloudflareClient
from .config import ClientConfig, TimeoutConfig
from .core.json_types import JsonDocument
from .core.open_enum import OpenEnum
from .core.pagination import CursorRequest, PageRequest
from .core.query import QueryNaming
from .errors import (
    ArgumentValidationError,
    CloudflareApiError,
    CloudflareDecodeError,
    CloudflareError,
    CloudflareTransportError,
)
from .types import FetchResponse, RequestOptions

__version__ = "0.1.0"

__all__ = [
    "CloudflareClient",
    "ClientConfig",
    "TimeoutConfig",
    "JsonDocument",
    "OpenEnum",
    "CursorRequest",
    "PageRequest",
    "QueryNaming",
    "CloudflareError",
    "CloudflareTransportError",
    "CloudflareApiError",
    "CloudflareDecodeError",
    "ArgumentValidationError",
    "FetchResponse",
    "RequestOptions",
]
