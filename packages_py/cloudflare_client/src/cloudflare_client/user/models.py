"""
User profile, invitation and membership models.
"""
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..core.json_types import Timestamp
from ..core.models import CloudflareModel, FilterModel, ListOrderDirection
from ..core.open_enum import OpenEnum
from ..members.models import AccountRole, MemberPermissionGroupReference, MemberResourceGroupReference, MemberStatus


class AccountType(OpenEnum):
    STANDARD = "standard"
    ENTERPRISE = "enterprise"


class UserOrganization(CloudflareModel):
    id: str
    name: str = ""
    status: Optional[str] = None
    permissions: Optional[List[str]] = None
    roles: Optional[List[str]] = None


class User(CloudflareModel):
    id: str
    email: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    telephone: Optional[str] = None
    country: Optional[str] = None
    zipcode: Optional[str] = None
    suspended: bool = False
    two_factor_authentication_enabled: bool = False
    two_factor_authentication_locked: bool = False
    has_pro_zones: bool = False
    has_business_zones: bool = False
    has_enterprise_zones: bool = False
    betas: Optional[List[str]] = None
    organizations: Optional[List[UserOrganization]] = None
    created_on: Optional[Timestamp] = None
    modified_on: Optional[Timestamp] = None


class EditUserRequest(CloudflareModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    country: Optional[str] = None
    telephone: Optional[str] = None
    zipcode: Optional[str] = None


class UserInvitation(CloudflareModel):
    id: str
    invited_member_email: str = ""
    status: MemberStatus
    invited_on: Optional[Timestamp] = None
    expires_on: Optional[Timestamp] = None
    organization_name: Optional[str] = None
    roles: Optional[List[AccountRole]] = None


class RespondToInvitationRequest(CloudflareModel):
    status: MemberStatus


class MembershipAccount(CloudflareModel):
    id: str
    name: str = ""
    type: Optional[AccountType] = None
    created_on: Optional[Timestamp] = None


class PermissionGrant(CloudflareModel):
    read: bool = False
    write: bool = False


class MembershipPermissions(CloudflareModel):
    analytics: Optional[PermissionGrant] = None
    billing: Optional[PermissionGrant] = None
    cache_purge: Optional[PermissionGrant] = None
    dns: Optional[PermissionGrant] = None
    load_balancer: Optional[PermissionGrant] = Field(None, alias="lb")
    logs: Optional[PermissionGrant] = None
    organization: Optional[PermissionGrant] = None
    ssl: Optional[PermissionGrant] = None
    waf: Optional[PermissionGrant] = None
    zones: Optional[PermissionGrant] = None


class MembershipPolicy(CloudflareModel):
    id: Optional[str] = None
    access: Optional[str] = None
    permission_groups: Optional[List[MemberPermissionGroupReference]] = None
    resource_groups: Optional[List[MemberResourceGroupReference]] = None


class Membership(CloudflareModel):
    id: str
    status: MemberStatus
    account: Optional[MembershipAccount] = None
    api_access_enabled: Optional[bool] = None
    permissions: Optional[MembershipPermissions] = None
    roles: Optional[List[str]] = None
    policies: Optional[List[MembershipPolicy]] = None


class UpdateMembershipRequest(CloudflareModel):
    status: MemberStatus


class MembershipOrderField(str, Enum):
    ID = "id"
    ACCOUNT_NAME = "account.name"
    STATUS = "status"


class ListMembershipsFilters(FilterModel):
    status: Optional[MemberStatus] = None
    account_name: Optional[str] = Field(None, serialization_alias="account.name")
    order: Optional[MembershipOrderField] = None
    direction: Optional[ListOrderDirection] = None
