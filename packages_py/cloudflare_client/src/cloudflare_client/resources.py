"""
Shared plumbing for resource wrappers.

Every resource API sends a request through the shared transport, classifies
the response and decodes the envelope's ``result`` the same way.
"""
import logging
from typing import Any, List, Optional, Type

from .core.base_client import BaseClient
from .core.envelope import Envelope, classify_response, decode_result
from .core.pagination import (
    CursorPaginatedResult,
    CursorRequest,
    PagePaginatedResult,
    PageRequest,
)
from .core.request import RequestBuilder

logger = logging.getLogger(__name__)

LOG_PREFIX = "[CloudflareResource]"


class ApiResource:
    """Base class for resource APIs bound to one transport."""

    def __init__(self, transport: BaseClient):
        self._transport = transport

    async def _send(self, builder: RequestBuilder):
        options = builder.build()
        response = await self._transport.request(options)
        return classify_response(response), response.text

    async def _execute(self, builder: RequestBuilder, result_type: Any) -> Any:
        """Send the request and return the decoded ``result``."""
        envelope, body = await self._send(builder)
        return decode_result(envelope, result_type, body)

    async def _execute_void(self, builder: RequestBuilder) -> None:
        await self._send(builder)

    async def _execute_page(
        self,
        builder: RequestBuilder,
        item_type: Type[Any],
        page: Optional[PageRequest] = None,
    ) -> PagePaginatedResult:
        """Fetch one page of a page-based list; paging params go last."""
        if page is not None:
            builder.param("page", page.page).param("per_page", page.per_page)
        envelope, body = await self._send(builder)
        items = decode_result(envelope, List[item_type], body)
        info = envelope.page_info()
        logger.debug(
            f"{LOG_PREFIX} Page fetched: {len(items)} item(s), "
            f"page={info.page if info else '-'}/{info.total_pages if info else '-'}"
        )
        return PagePaginatedResult(items=items, page_info=info)

    async def _execute_cursor(
        self,
        builder: RequestBuilder,
        item_type: Type[Any],
        request: Optional[CursorRequest] = None,
        per_page_param: str = "per_page",
        items_key: Optional[str] = None,
    ) -> CursorPaginatedResult:
        """
        Fetch one page of a cursor-based list.

        ``items_key`` names the field holding the items when ``result`` is an
        object rather than a bare array.
        """
        if request is not None:
            builder.param("cursor", request.cursor or None).param(per_page_param, request.per_page)
        envelope, body = await self._send(builder)
        items = self._select_items(envelope, item_type, items_key, body)
        info = envelope.cursor_info()
        logger.debug(
            f"{LOG_PREFIX} Cursor page fetched: {len(items)} item(s), "
            f"next={info.cursor if info and info.cursor else '<end>'}"
        )
        return CursorPaginatedResult(items=items, cursor_info=info)

    @staticmethod
    def _select_items(envelope: Envelope, item_type: Type[Any], items_key: Optional[str], body: str) -> List[Any]:
        if items_key is None:
            return decode_result(envelope, List[item_type], body)
        container = decode_result(envelope, Optional[dict], body) or {}
        selected = Envelope(success=True, result=container.get(items_key))
        return decode_result(selected, List[item_type], body)
