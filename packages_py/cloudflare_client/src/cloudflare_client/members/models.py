"""
Account member models.
"""
from enum import Enum
from typing import List, Optional

from ..core.json_types import JsonDocument
from ..core.models import CloudflareModel, FilterModel, ListOrderDirection
from ..core.open_enum import OpenEnum


class MemberStatus(OpenEnum):
    ACCEPTED = "accepted"
    PENDING = "pending"
    REJECTED = "rejected"


class MemberOrderField(str, Enum):
    USER_ID = "user.id"
    USER_EMAIL = "user.email"
    USER_FIRST_NAME = "user.first_name"
    USER_LAST_NAME = "user.last_name"
    STATUS = "status"


class AccountRole(CloudflareModel):
    id: str
    name: str = ""
    description: Optional[str] = None
    permissions: Optional[JsonDocument] = None


class MemberUser(CloudflareModel):
    id: str
    email: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    two_factor_authentication_enabled: bool = False


class MemberPermissionGroupReference(CloudflareModel):
    id: str


class MemberResourceGroupReference(CloudflareModel):
    id: str


class MemberPolicy(CloudflareModel):
    id: Optional[str] = None
    access: str = ""
    permission_groups: List[MemberPermissionGroupReference] = []
    resource_groups: List[MemberResourceGroupReference] = []


class AccountMember(CloudflareModel):
    id: str
    status: MemberStatus
    user: Optional[MemberUser] = None
    roles: List[AccountRole] = []
    policies: Optional[List[MemberPolicy]] = None


class CreateMemberPolicyRequest(CloudflareModel):
    access: str
    permission_groups: List[MemberPermissionGroupReference]
    resource_groups: List[MemberResourceGroupReference]


class CreateAccountMemberRequest(CloudflareModel):
    email: str
    roles: List[str]
    policies: Optional[List[CreateMemberPolicyRequest]] = None
    status: Optional[MemberStatus] = None


class UpdateAccountMemberRequest(CloudflareModel):
    roles: List[str]
    policies: Optional[List[CreateMemberPolicyRequest]] = None


class ListAccountMembersFilters(FilterModel):
    status: Optional[MemberStatus] = None
    direction: Optional[ListOrderDirection] = None
    order: Optional[MemberOrderField] = None


class DeleteAccountMemberResult(CloudflareModel):
    id: str
