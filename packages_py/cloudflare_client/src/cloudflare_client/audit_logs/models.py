"""
Audit log models.

Account audit logs (v2) and user audit logs (v1) share the entry shape but
filter differently: v2 filters use underscores and accept ``.not`` exclusions,
v1 filters use dotted names and take a single value each.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..core.json_types import BoolOrString, JsonDocument, Timestamp
from ..core.models import CloudflareModel, FilterModel, ListOrderDirection


class AuditLogAccount(CloudflareModel):
    id: Optional[str] = None
    name: Optional[str] = None


class AuditLogAction(CloudflareModel):
    description: Optional[str] = None
    # v2 sends "success"/"failure", v1 sends a boolean
    result: BoolOrString = False
    time: Optional[Timestamp] = None
    type: Optional[str] = None


class AuditLogActor(CloudflareModel):
    id: Optional[str] = None
    context: Optional[str] = None
    email: Optional[str] = None
    ip_address: Optional[str] = None
    ip: Optional[str] = None
    token_id: Optional[str] = None
    token_name: Optional[str] = None
    type: Optional[str] = None


class AuditLogRaw(CloudflareModel):
    cf_ray_id: Optional[str] = None
    method: Optional[str] = None
    status_code: Optional[int] = None
    uri: Optional[str] = None
    user_agent: Optional[str] = None


class AuditLogResource(CloudflareModel):
    id: Optional[str] = None
    product: Optional[str] = None
    request: Optional[JsonDocument] = None
    response: Optional[JsonDocument] = None
    scope: Optional[str] = None
    type: Optional[str] = None


class AuditLogZone(CloudflareModel):
    id: Optional[str] = None
    name: Optional[str] = None


class AuditLog(CloudflareModel):
    id: str
    account: Optional[AuditLogAccount] = None
    action: Optional[AuditLogAction] = None
    actor: Optional[AuditLogActor] = None
    raw: Optional[AuditLogRaw] = None
    resource: Optional[AuditLogResource] = None
    zone: Optional[AuditLogZone] = None
    # v1 only
    when: Optional[Timestamp] = None
    interface: Optional[str] = None
    metadata: Optional[JsonDocument] = None
    new_value: Optional[JsonDocument] = Field(None, alias="newValue")
    old_value: Optional[JsonDocument] = Field(None, alias="oldValue")


def _not(name: str):
    return Field(None, serialization_alias=f"{name}.not")


class ListAuditLogsFilters(FilterModel):
    """Account audit log (v2) filters. Every list filter has a ``.not`` twin."""
    direction: Optional[ListOrderDirection] = None
    before: Optional[datetime] = None
    since: Optional[datetime] = None
    id: Optional[List[str]] = None
    id_not: Optional[List[str]] = _not("id")
    actor_email: Optional[List[str]] = None
    actor_email_not: Optional[List[str]] = _not("actor_email")
    actor_id: Optional[List[str]] = None
    actor_id_not: Optional[List[str]] = _not("actor_id")
    actor_ip_address: Optional[List[str]] = None
    actor_ip_address_not: Optional[List[str]] = _not("actor_ip_address")
    actor_token_id: Optional[List[str]] = None
    actor_token_id_not: Optional[List[str]] = _not("actor_token_id")
    actor_token_name: Optional[List[str]] = None
    actor_token_name_not: Optional[List[str]] = _not("actor_token_name")
    actor_context: Optional[List[str]] = None
    actor_context_not: Optional[List[str]] = _not("actor_context")
    actor_type: Optional[List[str]] = None
    actor_type_not: Optional[List[str]] = _not("actor_type")
    action_type: Optional[List[str]] = None
    action_type_not: Optional[List[str]] = _not("action_type")
    action_result: Optional[List[str]] = None
    action_result_not: Optional[List[str]] = _not("action_result")
    resource_id: Optional[List[str]] = None
    resource_id_not: Optional[List[str]] = _not("resource_id")
    resource_product: Optional[List[str]] = None
    resource_product_not: Optional[List[str]] = _not("resource_product")
    resource_type: Optional[List[str]] = None
    resource_type_not: Optional[List[str]] = _not("resource_type")
    resource_scope: Optional[List[str]] = None
    resource_scope_not: Optional[List[str]] = _not("resource_scope")
    zone_id: Optional[List[str]] = None
    zone_id_not: Optional[List[str]] = _not("zone_id")
    zone_name: Optional[List[str]] = None
    zone_name_not: Optional[List[str]] = _not("zone_name")
    raw_cf_ray_id: Optional[List[str]] = None
    raw_cf_ray_id_not: Optional[List[str]] = _not("raw_cf_ray_id")
    raw_method: Optional[List[str]] = None
    raw_method_not: Optional[List[str]] = _not("raw_method")
    raw_status_code: Optional[List[int]] = None
    raw_status_code_not: Optional[List[int]] = _not("raw_status_code")
    raw_uri: Optional[List[str]] = None
    raw_uri_not: Optional[List[str]] = _not("raw_uri")
    account_name: Optional[List[str]] = None
    account_name_not: Optional[List[str]] = _not("account_name")


class ListUserAuditLogsFilters(FilterModel):
    """User audit log (v1) filters, sent with dotted names (``actor.email``)."""
    id: Optional[str] = None
    actor_email: Optional[str] = None
    actor_ip: Optional[str] = None
    action_type: Optional[str] = None
    zone_name: Optional[str] = None
    before: Optional[datetime] = None
    since: Optional[datetime] = None
    direction: Optional[ListOrderDirection] = None
    hide_user_logs: Optional[bool] = Field(None, serialization_alias="hide_user_logs")
