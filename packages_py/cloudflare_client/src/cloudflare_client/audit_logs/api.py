"""
Audit logs API.
"""
from typing import AsyncIterator, Optional

from ..core.pagination import (
    DEFAULT_PER_PAGE,
    CursorPaginatedResult,
    CursorPagination,
    CursorRequest,
    PagePaginatedResult,
    PagePagination,
    PageRequest,
    paginate,
)
from ..core.query import QueryNaming
from ..core.request import RequestBuilder
from ..core.validation import require_not_blank
from ..resources import ApiResource
from .models import AuditLog, ListAuditLogsFilters, ListUserAuditLogsFilters

ACCOUNT_AUDIT_LOGS = "accounts/{account_id}/logs/audit"
USER_AUDIT_LOGS = "user/audit_logs"

# v2 names its page size "limit"
ACCOUNT_PAGE_SIZE_PARAM = "limit"


class AuditLogsApi(ApiResource):

    async def get_account_audit_logs(
        self,
        account_id: str,
        filters: Optional[ListAuditLogsFilters] = None,
        page: Optional[CursorRequest] = None,
    ) -> CursorPaginatedResult[AuditLog]:
        """One page of account audit logs (v2, cursor-paginated)."""
        require_not_blank(account_id, "account_id")
        builder = (
            RequestBuilder.for_path("GET", ACCOUNT_AUDIT_LOGS, account_id=account_id)
            .filters(filters, QueryNaming.UNDERSCORE)
        )
        return await self._execute_cursor(builder, AuditLog, page, per_page_param=ACCOUNT_PAGE_SIZE_PARAM)

    def get_all_account_audit_logs(
        self,
        account_id: str,
        filters: Optional[ListAuditLogsFilters] = None,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> AsyncIterator[AuditLog]:
        require_not_blank(account_id, "account_id")

        async def fetch(request: CursorRequest) -> CursorPaginatedResult[AuditLog]:
            return await self.get_account_audit_logs(account_id, filters, request)

        return paginate(fetch, CursorPagination(per_page=per_page))

    async def list_user_audit_logs(
        self,
        filters: Optional[ListUserAuditLogsFilters] = None,
        page: Optional[PageRequest] = None,
    ) -> PagePaginatedResult[AuditLog]:
        """One page of the current user's audit logs (v1, page-paginated)."""
        builder = RequestBuilder.for_path("GET", USER_AUDIT_LOGS).filters(filters, QueryNaming.DOTTED)
        return await self._execute_page(builder, AuditLog, page)

    def list_all_user_audit_logs(
        self,
        filters: Optional[ListUserAuditLogsFilters] = None,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> AsyncIterator[AuditLog]:

        async def fetch(page: PageRequest) -> PagePaginatedResult[AuditLog]:
            return await self.list_user_audit_logs(filters, page)

        return paginate(fetch, PagePagination(per_page=per_page))
