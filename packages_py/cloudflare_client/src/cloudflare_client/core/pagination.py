"""
Pagination engine.

Two strategies share one contract: ``paginate(fetch_page, strategy)`` returns
a lazy async iterator over every item. Page-based endpoints report
``page``/``total_pages``; cursor-based endpoints return an opaque token that is
echoed back until it comes back empty.

The next page is requested only when the consumer pulls past the last item of
the current one, so abandoning iteration early issues no further requests.
"""
import logging
from dataclasses import dataclass, field
from typing import AsyncIterator, Awaitable, Callable, Generic, List, Optional, TypeVar, Union

from .envelope import CursorInfo, PageInfo

logger = logging.getLogger(__name__)

LOG_PREFIX = "[Pagination]"

DEFAULT_PER_PAGE = 50

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Parameters for one page-based fetch."""
    page: int
    per_page: int


@dataclass(frozen=True)
class CursorRequest:
    """Parameters for one cursor-based fetch. ``cursor`` is None on the first call."""
    cursor: Optional[str]
    per_page: int


@dataclass
class PagePaginatedResult(Generic[T]):
    items: List[T] = field(default_factory=list)
    page_info: Optional[PageInfo] = None


@dataclass
class CursorPaginatedResult(Generic[T]):
    items: List[T] = field(default_factory=list)
    cursor_info: Optional[CursorInfo] = None

    @property
    def next_cursor(self) -> Optional[str]:
        if self.cursor_info is None or not self.cursor_info.cursor:
            return None
        return self.cursor_info.cursor


PageFetcher = Callable[[PageRequest], Awaitable[PagePaginatedResult[T]]]
CursorFetcher = Callable[[CursorRequest], Awaitable[CursorPaginatedResult[T]]]


@dataclass(frozen=True)
class PagePagination:
    per_page: int = DEFAULT_PER_PAGE
    start_page: int = 1

    async def iterate(self, fetch_page: PageFetcher) -> AsyncIterator[T]:
        page = self.start_page
        while True:
            logger.debug(f"{LOG_PREFIX} Fetching page {page} (per_page={self.per_page})")
            result = await fetch_page(PageRequest(page=page, per_page=self.per_page))
            for item in result.items:
                yield item

            info = result.page_info
            if info is None or not result.items or page >= info.total_pages:
                return
            page += 1


@dataclass(frozen=True)
class CursorPagination:
    per_page: int = DEFAULT_PER_PAGE

    async def iterate(self, fetch_page: CursorFetcher) -> AsyncIterator[T]:
        cursor: Optional[str] = None
        while True:
            logger.debug(f"{LOG_PREFIX} Fetching cursor page (cursor={cursor or '<first>'}, per_page={self.per_page})")
            result = await fetch_page(CursorRequest(cursor=cursor, per_page=self.per_page))
            for item in result.items:
                yield item

            cursor = result.next_cursor
            if cursor is None:
                return


PaginationStrategy = Union[PagePagination, CursorPagination]


def paginate(
    fetch_page: Callable[..., Awaitable[Union[PagePaginatedResult[T], CursorPaginatedResult[T]]]],
    strategy: PaginationStrategy,
) -> AsyncIterator[T]:
    """
    Lazily iterate every item ``fetch_page`` can produce under ``strategy``.

    Each call returns a fresh iterator. Failures raised by ``fetch_page``
    propagate out of the ``async for`` at the step that triggered them.
    """
    return strategy.iterate(fetch_page)
