"""
Tests for the pagination engine.
"""
import pytest

from cloudflare_client.core.envelope import CursorInfo, PageInfo
from cloudflare_client.core.pagination import (
    CursorPaginatedResult,
    CursorPagination,
    CursorRequest,
    PagePaginatedResult,
    PagePagination,
    PageRequest,
    paginate,
)
from cloudflare_client.errors import CloudflareTransportError


async def _collect(iterator):
    return [item async for item in iterator]


def _page_fetcher(pages, calls):
    async def fetch(request: PageRequest):
        calls.append(request)
        items = pages[request.page - 1]
        info = PageInfo(page=request.page, per_page=request.per_page, count=len(items), total_pages=len(pages))
        return PagePaginatedResult(items=items, page_info=info)
    return fetch


def _cursor_fetcher(pages, calls):
    async def fetch(request: CursorRequest):
        calls.append(request)
        index = len(calls) - 1
        items, next_cursor = pages[index]
        return CursorPaginatedResult(items=items, cursor_info=CursorInfo(cursor=next_cursor))
    return fetch


@pytest.mark.asyncio
async def test_single_page_issues_one_request():
    calls = []
    items = await _collect(paginate(_page_fetcher([[1, 2, 3]], calls), PagePagination(per_page=10)))
    assert items == [1, 2, 3]
    assert calls == [PageRequest(page=1, per_page=10)]


@pytest.mark.asyncio
async def test_page_pagination_walks_every_page():
    calls = []
    fetch = _page_fetcher([[1, 2], [3, 4], [5]], calls)
    assert await _collect(paginate(fetch, PagePagination(per_page=2))) == [1, 2, 3, 4, 5]
    assert [c.page for c in calls] == [1, 2, 3]


@pytest.mark.asyncio
async def test_page_pagination_stops_on_empty_page():
    calls = []

    async def fetch(request):
        calls.append(request)
        return PagePaginatedResult(items=[], page_info=PageInfo(page=request.page, total_pages=5))

    assert await _collect(paginate(fetch, PagePagination())) == []
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_page_pagination_stops_without_metadata():
    calls = []

    async def fetch(request):
        calls.append(request)
        return PagePaginatedResult(items=["a"], page_info=None)

    assert await _collect(paginate(fetch, PagePagination())) == ["a"]
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_cursor_pagination_three_pages():
    calls = []
    pages = [(["a", "b"], "c1"), (["c"], "c2"), (["d"], None)]
    items = await _collect(paginate(_cursor_fetcher(pages, calls), CursorPagination(per_page=2)))
    assert items == ["a", "b", "c", "d"]
    assert [c.cursor for c in calls] == [None, "c1", "c2"]
    assert all(c.per_page == 2 for c in calls)


@pytest.mark.asyncio
async def test_cursor_pagination_empty_cursor_ends():
    calls = []
    pages = [(["a"], "")]
    assert await _collect(paginate(_cursor_fetcher(pages, calls), CursorPagination())) == ["a"]
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_iteration_is_lazy():
    calls = []
    fetch = _page_fetcher([[1, 2], [3, 4], [5, 6]], calls)
    iterator = paginate(fetch, PagePagination(per_page=2))

    first = []
    async for item in iterator:
        first.append(item)
        if len(first) == 2:
            break

    assert first == [1, 2]
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_failure_propagates_from_later_page():
    calls = []

    async def fetch(request):
        calls.append(request)
        if request.page == 2:
            raise CloudflareTransportError(500, "Internal Server Error")
        return PagePaginatedResult(items=[1], page_info=PageInfo(page=1, total_pages=3))

    seen = []
    with pytest.raises(CloudflareTransportError):
        async for item in paginate(fetch, PagePagination()):
            seen.append(item)
    assert seen == [1]


def test_next_cursor():
    assert CursorPaginatedResult(items=[], cursor_info=None).next_cursor is None
    assert CursorPaginatedResult(items=[], cursor_info=CursorInfo(cursor="")).next_cursor is None
    assert CursorPaginatedResult(items=[], cursor_info=CursorInfo(cursor="x")).next_cursor == "x"
