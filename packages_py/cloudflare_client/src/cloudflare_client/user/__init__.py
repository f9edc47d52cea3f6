"""
The authenticated user, invitations and memberships.
"""
from .api import UserApi
from .models import (
    AccountType,
    UserOrganization,
    User,
    EditUserRequest,
    UserInvitation,
    RespondToInvitationRequest,
    MembershipAccount,
    PermissionGrant,
    MembershipPermissions,
    MembershipPolicy,
    Membership,
    UpdateMembershipRequest,
    MembershipOrderField,
    ListMembershipsFilters,
)

__all__ = [
    "UserApi",
    "AccountType",
    "UserOrganization",
    "User",
    "EditUserRequest",
    "UserInvitation",
    "RespondToInvitationRequest",
    "MembershipAccount",
    "PermissionGrant",
    "MembershipPermissions",
    "MembershipPolicy",
    "Membership",
    "UpdateMembershipRequest",
    "MembershipOrderField",
    "ListMembershipsFilters",
]
