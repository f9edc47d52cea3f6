"""
Core HTTP client implementation based on httpx.
"""
import json
import logging
from typing import Any, Optional

import httpx

from ..auth.auth_handler import AuthHandler, create_auth_handler
from ..config import ClientConfig, ResolvedConfig, resolve_config
from ..types import FetchResponse, RequestContext, RequestOptions
from .query import render_query

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[CloudflareClient]"


def _format_body(body: Any) -> str:
    """
    Format body for logging safeguards against binary data.
    """
    if body is None:
        return "<empty>"
    if isinstance(body, (bytes, bytearray)):
        return f"<binary data: {len(body)} bytes>"
    if isinstance(body, str):
        try:
            if body.strip().startswith(("{", "[")):
                return json.dumps(json.loads(body), indent=2)
        except json.JSONDecodeError:
            pass
        if len(body) > 5000:
            return body[:5000] + "... (truncated)"
        return body
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2)
    return str(body)


class BaseClient:
    """
    Base HTTP client wrapping httpx.AsyncClient.

    Sends already-encoded relative paths against ``base_url``; httpx keeps
    percent-escapes in relative URLs intact.
    """
    def __init__(self, config: ClientConfig):
        self._config_raw = config
        self._config: ResolvedConfig = resolve_config(config)
        self._client: Optional[httpx.AsyncClient] = config.httpx_client
        self._auth_handler: Optional[AuthHandler] = create_auth_handler(self._config)

        # Flag to track if we own the client (created it)
        self._own_client = self._client is None

    @property
    def config(self) -> ResolvedConfig:
        return self._config

    async def connect(self) -> None:
        """Initialize the client if needed."""
        if self._client:
            return

        timeout = httpx.Timeout(
            connect=self._config.timeout.connect,
            read=self._config.timeout.read,
            write=self._config.timeout.write,
            pool=self._config.timeout.pool,
        )

        # Trailing slash so relative paths append rather than replace the last segment
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url + "/",
            timeout=timeout,
            headers=self._config.headers,
            follow_redirects=True,
        )

    async def close(self) -> None:
        """Close the client if we own it."""
        if self._own_client and self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BaseClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def request(self, options: RequestOptions) -> FetchResponse:
        """Execute a request."""
        if not self._client:
            await self.connect()

        assert self._client is not None

        method = options.get("method", "GET")
        url = options.get("url", "").lstrip("/") + render_query(options.get("query", []))

        headers = dict(options.get("headers", {}))
        headers.setdefault("Accept", "application/json")

        json_body = options.get("json")
        has_body = "json" in options
        if has_body and "Content-Type" not in headers:
            headers["Content-Type"] = "application/json"

        if self._auth_handler:
            context: RequestContext = {
                "method": method,
                "url": f"{self._config.base_url}/{url}",
                "headers": headers,
                "body": json_body,
            }
            auth_headers = self._auth_handler.get_header(context)
            if auth_headers:
                headers.update(auth_headers)

        logger.debug(f"{LOG_PREFIX} Request: {method} {url}")
        if has_body:
            logger.debug(f"{LOG_PREFIX} Request body: {_format_body(json_body)}")

        try:
            kwargs: dict = {"method": method, "url": url, "headers": headers}
            if has_body:
                kwargs["content"] = json.dumps(json_body).encode("utf-8")
            if "timeout" in options:
                kwargs["timeout"] = options["timeout"]
            response = await self._client.request(**kwargs)
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {method} {url}: {e}")
            raise e

        logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {method} {url}")

        return FetchResponse(
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
            url=str(response.url),
            method=method,
            text=response.text,
        )
