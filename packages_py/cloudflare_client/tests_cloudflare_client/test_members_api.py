"""
Tests for MembersApi.
"""
import json

import pytest
import respx

from cloudflare_client.client import CloudflareClient
from cloudflare_client.core.models import ListOrderDirection
from cloudflare_client.errors import ArgumentValidationError
from cloudflare_client.members.models import (
    CreateAccountMemberRequest,
    CreateMemberPolicyRequest,
    ListAccountMembersFilters,
    MemberOrderField,
    MemberPermissionGroupReference,
    MemberResourceGroupReference,
    MemberStatus,
    UpdateAccountMemberRequest,
)

MEMBER = {
    "id": "mem1",
    "status": "accepted",
    "user": {"id": "u1", "email": "dev@example.com", "two_factor_authentication_enabled": True},
    "roles": [{"id": "role1", "name": "Administrator", "permissions": {"dns": {"read": True, "write": True}}}],
}


@pytest.mark.asyncio
async def test_list_members_query(config, base_url, envelope):
    filters = ListAccountMembersFilters(
        status=MemberStatus.ACCEPTED, direction=ListOrderDirection.ASC, order=MemberOrderField.USER_EMAIL
    )
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            route = mock.get("/accounts/acc-1/members").respond(
                200, json=envelope([MEMBER], result_info={"page": 1, "per_page": 20, "total_pages": 1})
            )

            result = await cf.members.list_members("acc-1", filters)

            member = result.items[0]
            assert member.user.email == "dev@example.com"
            assert member.roles[0].permissions.get_property("dns").get_bool("write") is True
            assert route.calls.last.request.url.query.decode() == "status=accepted&direction=asc&order=user.email"


@pytest.mark.asyncio
async def test_list_all_members(config, base_url, envelope):
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            mock.get("/accounts/acc-1/members").respond(
                200, json=envelope([MEMBER], result_info={"page": 1, "per_page": 50, "total_pages": 1})
            )
            members = [m async for m in cf.members.list_all_members("acc-1")]
            assert [m.id for m in members] == ["mem1"]


@pytest.mark.asyncio
async def test_create_update_delete_member(config, base_url, envelope):
    policy = CreateMemberPolicyRequest(
        access="allow",
        permission_groups=[MemberPermissionGroupReference(id="pg1")],
        resource_groups=[MemberResourceGroupReference(id="rg1")],
    )
    async with CloudflareClient(config) as cf:
        with respx.mock(base_url=base_url) as mock:
            create = mock.post("/accounts/acc-1/members").respond(200, json=envelope({**MEMBER, "status": "pending"}))
            update = mock.put("/accounts/acc-1/members/mem1").respond(200, json=envelope(MEMBER))
            mock.get("/accounts/acc-1/members/mem1").respond(200, json=envelope(MEMBER))
            mock.delete("/accounts/acc-1/members/mem1").respond(200, json=envelope({"id": "mem1"}))

            created = await cf.members.create_member(
                "acc-1", CreateAccountMemberRequest(email="dev@example.com", roles=["role1"], policies=[policy])
            )
            await cf.members.update_member("acc-1", "mem1", UpdateAccountMemberRequest(roles=["role1", "role2"]))
            fetched = await cf.members.get_member("acc-1", "mem1")
            deleted = await cf.members.delete_member("acc-1", "mem1")

            assert created.status == MemberStatus.PENDING
            assert fetched.id == "mem1"
            assert deleted.id == "mem1"
            assert json.loads(create.calls.last.request.content) == {
                "email": "dev@example.com",
                "roles": ["role1"],
                "policies": [{"access": "allow", "permission_groups": [{"id": "pg1"}], "resource_groups": [{"id": "rg1"}]}],
            }
            assert json.loads(update.calls.last.request.content) == {"roles": ["role1", "role2"]}


@pytest.mark.asyncio
async def test_member_id_required(config):
    async with CloudflareClient(config) as cf:
        with pytest.raises(ArgumentValidationError) as exc:
            await cf.members.get_member("acc-1", "")
        assert exc.value.param_name == "member_id"
