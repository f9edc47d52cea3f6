"""
Account members API (``accounts/{account_id}/members``).
"""
from typing import AsyncIterator, Optional

from ..core.pagination import DEFAULT_PER_PAGE, PagePaginatedResult, PagePagination, PageRequest, paginate
from ..core.request import RequestBuilder
from ..core.validation import require_not_blank, require_not_none
from ..resources import ApiResource
from .models import (
    AccountMember,
    CreateAccountMemberRequest,
    DeleteAccountMemberResult,
    ListAccountMembersFilters,
    UpdateAccountMemberRequest,
)

MEMBERS = "accounts/{account_id}/members"
MEMBER = "accounts/{account_id}/members/{member_id}"


class MembersApi(ApiResource):

    async def list_members(
        self,
        account_id: str,
        filters: Optional[ListAccountMembersFilters] = None,
        page: Optional[PageRequest] = None,
    ) -> PagePaginatedResult[AccountMember]:
        require_not_blank(account_id, "account_id")
        builder = RequestBuilder.for_path("GET", MEMBERS, account_id=account_id).filters(filters)
        return await self._execute_page(builder, AccountMember, page)

    def list_all_members(
        self,
        account_id: str,
        filters: Optional[ListAccountMembersFilters] = None,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> AsyncIterator[AccountMember]:
        require_not_blank(account_id, "account_id")

        async def fetch(page: PageRequest) -> PagePaginatedResult[AccountMember]:
            return await self.list_members(account_id, filters, page)

        return paginate(fetch, PagePagination(per_page=per_page))

    async def get_member(self, account_id: str, member_id: str) -> AccountMember:
        require_not_blank(account_id, "account_id")
        require_not_blank(member_id, "member_id")
        builder = RequestBuilder.for_path("GET", MEMBER, account_id=account_id, member_id=member_id)
        return await self._execute(builder, AccountMember)

    async def create_member(self, account_id: str, request: CreateAccountMemberRequest) -> AccountMember:
        """Invite a member to the account."""
        require_not_blank(account_id, "account_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("POST", MEMBERS, account_id=account_id).json(request)
        return await self._execute(builder, AccountMember)

    async def update_member(
        self, account_id: str, member_id: str, request: UpdateAccountMemberRequest
    ) -> AccountMember:
        require_not_blank(account_id, "account_id")
        require_not_blank(member_id, "member_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("PUT", MEMBER, account_id=account_id, member_id=member_id).json(request)
        return await self._execute(builder, AccountMember)

    async def delete_member(self, account_id: str, member_id: str) -> DeleteAccountMemberResult:
        require_not_blank(account_id, "account_id")
        require_not_blank(member_id, "member_id")
        builder = RequestBuilder.for_path("DELETE", MEMBER, account_id=account_id, member_id=member_id)
        return await self._execute(builder, DeleteAccountMemberResult)
