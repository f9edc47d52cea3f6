"""
Account members.
"""
from .api import MembersApi
from .models import (
    MemberStatus,
    MemberOrderField,
    AccountRole,
    MemberUser,
    MemberPermissionGroupReference,
    MemberResourceGroupReference,
    MemberPolicy,
    AccountMember,
    CreateMemberPolicyRequest,
    CreateAccountMemberRequest,
    UpdateAccountMemberRequest,
    ListAccountMembersFilters,
    DeleteAccountMemberResult,
)

__all__ = [
    "MembersApi",
    "MemberStatus",
    "MemberOrderField",
    "AccountRole",
    "MemberUser",
    "MemberPermissionGroupReference",
    "MemberResourceGroupReference",
    "MemberPolicy",
    "AccountMember",
    "CreateMemberPolicyRequest",
    "CreateAccountMemberRequest",
    "UpdateAccountMemberRequest",
    "ListAccountMembersFilters",
    "DeleteAccountMemberResult",
]
