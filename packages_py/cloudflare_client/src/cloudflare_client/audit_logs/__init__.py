"""
Account (v2) and user (v1) audit logs.
"""
from .api import AuditLogsApi
from .models import (
    AuditLogAccount,
    AuditLogAction,
    AuditLogActor,
    AuditLogRaw,
    AuditLogResource,
    AuditLogZone,
    AuditLog,
    ListAuditLogsFilters,
    ListUserAuditLogsFilters,
)

__all__ = [
    "AuditLogsApi",
    "AuditLogAccount",
    "AuditLogAction",
    "AuditLogActor",
    "AuditLogRaw",
    "AuditLogResource",
    "AuditLogZone",
    "AuditLog",
    "ListAuditLogsFilters",
    "ListUserAuditLogsFilters",
]
