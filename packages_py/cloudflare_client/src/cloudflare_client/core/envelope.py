"""
Envelope decoding and response classification.

Every Cloudflare v4 response is wrapped in the same envelope:

    {"success": bool, "errors": [...], "messages": [...], "result": ...,
     "result_info": {...}}

``classify_response`` decides which failure (if any) a response represents;
``decode_envelope`` turns the body into a typed result.
"""
import json
import logging
from functools import lru_cache
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union, get_origin

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from ..errors import CloudflareApiError, CloudflareDecodeError, CloudflareTransportError
from ..types import FetchResponse

logger = logging.getLogger(__name__)

LOG_PREFIX = "[Envelope]"

T = TypeVar("T")


class ApiError(BaseModel):
    """A single error entry from the envelope's ``errors`` list."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    code: int = 0
    message: str = ""


class ApiMessage(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    code: Optional[int] = None
    message: str = ""


class PageInfo(BaseModel):
    """Offset pagination metadata (``result_info`` on page-based endpoints)."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    page: int = 1
    per_page: int = 0
    count: int = 0
    total_count: int = 0
    total_pages: int = 0
    cursor: Optional[str] = None


class CursorInfo(BaseModel):
    """Cursor pagination metadata. Only ``cursor`` drives iteration."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    cursor: Optional[str] = None
    count: int = 0
    per_page: int = 0


class Envelope(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True, extra="ignore")

    success: bool
    errors: List[ApiError] = Field(default_factory=list)
    messages: List[ApiMessage] = Field(default_factory=list)
    result: Optional[Any] = None
    result_info: Optional[Dict[str, Any]] = None
    cursor_result_info: Optional[Dict[str, Any]] = None
    cursor: Optional[str] = None

    @field_validator("messages", mode="before")
    @classmethod
    def wrap_plain_messages(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [{"message": item} if isinstance(item, str) else item for item in v]
        return v

    def page_info(self) -> Optional[PageInfo]:
        if self.result_info is None:
            return None
        return PageInfo.model_validate(self.result_info)

    def cursor_info(self) -> Optional[CursorInfo]:
        """Cursor metadata from whichever location this API generation uses."""
        if self.cursor_result_info is not None:
            return CursorInfo.model_validate(self.cursor_result_info)
        if self.result_info is not None:
            return CursorInfo.model_validate(self.result_info)
        if self.cursor is not None:
            return CursorInfo(cursor=self.cursor)
        return None


@lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def empty_result(result_type: Any) -> Any:
    """The value returned when a successful envelope carries no ``result``."""
    origin = get_origin(result_type) or result_type
    if origin in (list, List, tuple):
        return [] if origin is not tuple else ()
    if origin in (dict, Dict):
        return {}
    return None


def _describe_errors(errors: List[ApiError]) -> str:
    return ", ".join(f"[{e.code}] {e.message}" for e in errors)


def parse_envelope(body: Union[str, bytes, None]) -> Envelope:
    """Parse raw body text into an Envelope, or raise CloudflareDecodeError."""
    text = body.decode("utf-8", errors="replace") if isinstance(body, (bytes, bytearray)) else (body or "")
    if not text.strip():
        raise CloudflareDecodeError("Cloudflare API response body is empty", text)
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise CloudflareDecodeError("Failed to parse Cloudflare API response as JSON", text, e)
    if not isinstance(raw, dict) or not isinstance(raw.get("success"), bool):
        raise CloudflareDecodeError("Cloudflare API response is not a valid envelope (missing 'success')", text)
    try:
        return Envelope.model_validate(raw)
    except ValidationError as e:
        raise CloudflareDecodeError("Failed to deserialize Cloudflare API envelope", text, e)


def decode_result(envelope: Envelope, result_type: Any, body: str = "") -> Any:
    """
    Extract the typed ``result`` from a parsed envelope.

    A failing envelope raises CloudflareApiError with every error in order. A
    missing result on success yields the empty value for ``result_type``.
    """
    if not envelope.success:
        logger.error(f"{LOG_PREFIX} API reported failure: {_describe_errors(envelope.errors)}")
        raise CloudflareApiError(envelope.errors, envelope.messages, body)

    if envelope.result is None:
        return empty_result(result_type)
    if result_type is None or result_type is type(None):
        return None
    try:
        return _adapter(result_type).validate_python(envelope.result)
    except ValidationError as e:
        logger.error(f"{LOG_PREFIX} Result did not match {result_type!r}: {e.error_count()} error(s)")
        raise CloudflareDecodeError(f"Failed to deserialize Cloudflare API result as {result_type!r}", body, e)


def decode_envelope(body: Union[str, bytes, None], result_type: Any) -> Any:
    """Parse ``body`` and return its typed result."""
    envelope = parse_envelope(body)
    text = body.decode("utf-8", errors="replace") if isinstance(body, (bytes, bytearray)) else (body or "")
    return decode_result(envelope, result_type, text)


def classify_response(response: FetchResponse) -> Envelope:
    """
    Apply status-code precedence and return the parsed envelope.

    Non-2xx responses raise CloudflareTransportError without reading the body
    as an envelope. 2xx responses are parsed; ``success: false`` raises
    CloudflareApiError.
    """
    if not response.is_success:
        logger.error(
            f"{LOG_PREFIX} Transport failure: {response.method} {response.url} -> "
            f"{response.status} {response.status_text}"
        )
        raise CloudflareTransportError(
            status_code=response.status,
            reason=response.status_text,
            body=response.text,
            method=response.method,
            url=response.url,
            headers=response.headers,
        )

    envelope = parse_envelope(response.text)
    if not envelope.success:
        logger.error(f"{LOG_PREFIX} API reported failure: {_describe_errors(envelope.errors)}")
        raise CloudflareApiError(envelope.errors, envelope.messages, response.text)
    return envelope
