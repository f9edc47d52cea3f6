"""
Exception hierarchy for cloudflare_client.

Two failure kinds are never conflated:

- CloudflareTransportError: the HTTP status was outside 2xx.
- CloudflareApiError: the HTTP status was 2xx but the envelope reported
  ``success: false``.

CloudflareDecodeError covers bodies that cannot be read as an envelope, and
ArgumentValidationError is raised before any request is sent.
"""
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from .core.envelope import ApiError, ApiMessage


class CloudflareError(Exception):
    """Base exception for all cloudflare_client failures."""
    pass


class CloudflareTransportError(CloudflareError):
    def __init__(
        self,
        status_code: int,
        reason: str = "",
        body: str = "",
        method: Optional[str] = None,
        url: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        msg = f"Cloudflare API request failed with status code {status_code}"
        if reason:
            msg += f" ({reason})"
        if method and url:
            msg += f" for {method} {url}"
        super().__init__(msg)
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.method = method
        self.url = url
        self.headers = dict(headers or {})

    @property
    def retry_after(self) -> Optional[str]:
        """The ``Retry-After`` header value, if the server sent one."""
        for name, value in self.headers.items():
            if name.lower() == "retry-after":
                return value
        return None

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code in (401, 403)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code <= 599


class CloudflareApiError(CloudflareError):
    def __init__(
        self,
        errors: List["ApiError"],
        messages: Optional[List["ApiMessage"]] = None,
        body: str = "",
    ):
        details = ", ".join(f"[{e.code}] {e.message}" for e in errors)
        super().__init__(f"Cloudflare API returned a failure response: {details}")
        self.errors = list(errors)
        self.messages = list(messages or [])
        self.body = body

    @property
    def codes(self) -> List[int]:
        return [e.code for e in self.errors]


class CloudflareDecodeError(CloudflareError):
    def __init__(self, message: str, body: str = "", cause: Optional[Exception] = None):
        super().__init__(f"{message}. Raw response: {body}" if body else message)
        self.body = body
        self.cause = cause


class ArgumentValidationError(CloudflareError, ValueError):
    def __init__(self, param_name: str, message: Optional[str] = None):
        super().__init__(message or f"'{param_name}' must not be null or blank")
        self.param_name = param_name
