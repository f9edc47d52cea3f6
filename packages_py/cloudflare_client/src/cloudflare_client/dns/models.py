"""
DNS record models.
"""
from typing import List, Optional

from ..core.json_types import Timestamp
from ..core.models import CloudflareModel, FilterModel, ListOrderDirection
from ..core.open_enum import OpenEnum


class DnsRecordType(OpenEnum):
    A = "A"
    AAAA = "AAAA"
    CAA = "CAA"
    CERT = "CERT"
    CNAME = "CNAME"
    DNSKEY = "DNSKEY"
    DS = "DS"
    HTTPS = "HTTPS"
    LOC = "LOC"
    MX = "MX"
    NAPTR = "NAPTR"
    NS = "NS"
    PTR = "PTR"
    SMIMEA = "SMIMEA"
    SRV = "SRV"
    SSHFP = "SSHFP"
    SVCB = "SVCB"
    TLSA = "TLSA"
    TXT = "TXT"
    URI = "URI"


class DnsRecordMeta(CloudflareModel):
    auto_added: Optional[bool] = None
    source: Optional[str] = None


class DnsRecordSettings(CloudflareModel):
    ipv4_only: Optional[bool] = None
    ipv6_only: Optional[bool] = None


class DnsRecord(CloudflareModel):
    id: str
    name: str
    type: DnsRecordType
    content: str = ""
    proxied: bool = False
    proxiable: bool = False
    ttl: int = 1
    created_on: Optional[Timestamp] = None
    modified_on: Optional[Timestamp] = None
    comment: Optional[str] = None
    tags: Optional[List[str]] = None
    priority: Optional[int] = None
    meta: Optional[DnsRecordMeta] = None
    settings: Optional[DnsRecordSettings] = None


class CreateDnsRecordRequest(CloudflareModel):
    type: DnsRecordType
    name: str
    content: str
    ttl: int = 1  # 1 means "automatic"
    proxied: Optional[bool] = None
    comment: Optional[str] = None
    tags: Optional[List[str]] = None
    priority: Optional[int] = None
    settings: Optional[DnsRecordSettings] = None


class UpdateDnsRecordRequest(CreateDnsRecordRequest):
    pass


class PatchDnsRecordRequest(CloudflareModel):
    type: Optional[DnsRecordType] = None
    name: Optional[str] = None
    content: Optional[str] = None
    ttl: Optional[int] = None
    proxied: Optional[bool] = None
    comment: Optional[str] = None
    tags: Optional[List[str]] = None
    settings: Optional[DnsRecordSettings] = None


class ListDnsRecordsFilters(FilterModel):
    type: Optional[DnsRecordType] = None
    name: Optional[str] = None
    content: Optional[str] = None
    proxied: Optional[bool] = None
    order: Optional[str] = None
    direction: Optional[ListOrderDirection] = None


class BatchDeleteOperation(CloudflareModel):
    id: str


class BatchPatchOperation(PatchDnsRecordRequest):
    id: str


class BatchPutOperation(CreateDnsRecordRequest):
    id: str


class BatchDnsRecordsRequest(CloudflareModel):
    deletes: Optional[List[BatchDeleteOperation]] = None
    patches: Optional[List[BatchPatchOperation]] = None
    puts: Optional[List[BatchPutOperation]] = None
    posts: Optional[List[CreateDnsRecordRequest]] = None


class BatchDnsRecordsResult(CloudflareModel):
    deletes: List[DnsRecord] = []
    patches: List[DnsRecord] = []
    puts: List[DnsRecord] = []
    posts: List[DnsRecord] = []


class DnsScanAcceptItem(CloudflareModel):
    id: str
    type: DnsRecordType
    name: str
    content: str
    ttl: int = 1
    proxied: Optional[bool] = None
    comment: Optional[str] = None
    tags: Optional[List[str]] = None
    priority: Optional[int] = None
    settings: Optional[DnsRecordSettings] = None

    @classmethod
    def from_record(cls, record: DnsRecord) -> "DnsScanAcceptItem":
        # An all-null settings object is rejected by the API
        settings = record.settings
        if settings is not None and settings.ipv4_only is None and settings.ipv6_only is None:
            settings = None
        return cls(
            id=record.id,
            type=record.type,
            name=record.name,
            content=record.content,
            ttl=record.ttl,
            proxied=record.proxied,
            comment=record.comment,
            tags=record.tags,
            priority=record.priority,
            settings=settings,
        )


class DnsScanReviewRequest(CloudflareModel):
    accepts: List[DnsScanAcceptItem] = []
    rejects: List[str] = []


class DnsScanReviewResult(CloudflareModel):
    accepts: int = 0
    rejects: int = 0
