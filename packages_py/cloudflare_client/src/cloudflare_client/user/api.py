"""
User API: the authenticated user's profile, invitations and memberships.
"""
from typing import AsyncIterator, List, Optional

from ..core.pagination import DEFAULT_PER_PAGE, PagePaginatedResult, PagePagination, PageRequest, paginate
from ..core.request import RequestBuilder
from ..core.validation import require_not_blank, require_not_none
from ..resources import ApiResource
from .models import (
    EditUserRequest,
    ListMembershipsFilters,
    Membership,
    RespondToInvitationRequest,
    UpdateMembershipRequest,
    User,
    UserInvitation,
)

INVITES = "user/invites"
INVITE = "user/invites/{invitation_id}"
MEMBERSHIPS = "memberships"
MEMBERSHIP = "memberships/{membership_id}"


class UserApi(ApiResource):

    async def get_user(self) -> User:
        return await self._execute(RequestBuilder("user"), User)

    async def edit_user(self, request: EditUserRequest) -> User:
        require_not_none(request, "request")
        return await self._execute(RequestBuilder("user", "PATCH").json(request), User)

    # Invitations

    async def list_invitations(self) -> List[UserInvitation]:
        return await self._execute(RequestBuilder(INVITES), List[UserInvitation])

    async def get_invitation(self, invitation_id: str) -> UserInvitation:
        require_not_blank(invitation_id, "invitation_id")
        builder = RequestBuilder.for_path("GET", INVITE, invitation_id=invitation_id)
        return await self._execute(builder, UserInvitation)

    async def respond_to_invitation(
        self, invitation_id: str, request: RespondToInvitationRequest
    ) -> UserInvitation:
        """Accept or reject an invitation by setting its status."""
        require_not_blank(invitation_id, "invitation_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("PATCH", INVITE, invitation_id=invitation_id).json(request)
        return await self._execute(builder, UserInvitation)

    # Memberships

    async def list_memberships(
        self,
        filters: Optional[ListMembershipsFilters] = None,
        page: Optional[PageRequest] = None,
    ) -> PagePaginatedResult[Membership]:
        builder = RequestBuilder(MEMBERSHIPS).filters(filters)
        return await self._execute_page(builder, Membership, page)

    def list_all_memberships(
        self,
        filters: Optional[ListMembershipsFilters] = None,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> AsyncIterator[Membership]:

        async def fetch(page: PageRequest) -> PagePaginatedResult[Membership]:
            return await self.list_memberships(filters, page)

        return paginate(fetch, PagePagination(per_page=per_page))

    async def get_membership(self, membership_id: str) -> Membership:
        require_not_blank(membership_id, "membership_id")
        builder = RequestBuilder.for_path("GET", MEMBERSHIP, membership_id=membership_id)
        return await self._execute(builder, Membership)

    async def update_membership(self, membership_id: str, request: UpdateMembershipRequest) -> Membership:
        require_not_blank(membership_id, "membership_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("PUT", MEMBERSHIP, membership_id=membership_id).json(request)
        return await self._execute(builder, Membership)

    async def delete_membership(self, membership_id: str) -> None:
        require_not_blank(membership_id, "membership_id")
        await self._execute_void(RequestBuilder.for_path("DELETE", MEMBERSHIP, membership_id=membership_id))
