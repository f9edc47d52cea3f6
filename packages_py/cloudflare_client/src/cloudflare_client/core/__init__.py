"""
Transport, envelope decoding, query building and pagination shared by every
resource API.
"""
from .base_client import BaseClient
from .envelope import ApiError, ApiMessage, CursorInfo, Envelope, PageInfo, classify_response, decode_envelope
from .json_types import JsonDocument, Timestamp
from .open_enum import OpenEnum
from .pagination import (
    CursorPaginatedResult,
    CursorPagination,
    CursorRequest,
    PagePaginatedResult,
    PagePagination,
    PageRequest,
    paginate,
)
from .query import QueryBuilder, QueryNaming, build_path
from .request import RequestBuilder

__all__ = [
    "BaseClient",
    "ApiError",
    "ApiMessage",
    "CursorInfo",
    "Envelope",
    "PageInfo",
    "classify_response",
    "decode_envelope",
    "JsonDocument",
    "Timestamp",
    "OpenEnum",
    "CursorPaginatedResult",
    "CursorPagination",
    "CursorRequest",
    "PagePaginatedResult",
    "PagePagination",
    "PageRequest",
    "paginate",
    "QueryBuilder",
    "QueryNaming",
    "build_path",
    "RequestBuilder",
]
