"""
DNS records.
"""
from .api import DnsApi
from .models import (
    DnsRecordType,
    DnsRecordMeta,
    DnsRecordSettings,
    DnsRecord,
    CreateDnsRecordRequest,
    UpdateDnsRecordRequest,
    PatchDnsRecordRequest,
    ListDnsRecordsFilters,
    BatchDeleteOperation,
    BatchPatchOperation,
    BatchPutOperation,
    BatchDnsRecordsRequest,
    BatchDnsRecordsResult,
    DnsScanAcceptItem,
    DnsScanReviewRequest,
    DnsScanReviewResult,
)

__all__ = [
    "DnsApi",
    "DnsRecordType",
    "DnsRecordMeta",
    "DnsRecordSettings",
    "DnsRecord",
    "CreateDnsRecordRequest",
    "UpdateDnsRecordRequest",
    "PatchDnsRecordRequest",
    "ListDnsRecordsFilters",
    "BatchDeleteOperation",
    "BatchPatchOperation",
    "BatchPutOperation",
    "BatchDnsRecordsRequest",
    "BatchDnsRecordsResult",
    "DnsScanAcceptItem",
    "DnsScanReviewRequest",
    "DnsScanReviewResult",
]
