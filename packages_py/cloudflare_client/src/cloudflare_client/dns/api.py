"""
DNS records API (``zones/{zone_id}/dns_records``).
"""
from typing import AsyncIterator, List, Optional

from ..core.pagination import DEFAULT_PER_PAGE, PagePaginatedResult, PagePagination, PageRequest, paginate
from ..core.request import RequestBuilder
from ..core.validation import require_not_blank, require_not_none
from ..resources import ApiResource
from .models import (
    BatchDnsRecordsRequest,
    BatchDnsRecordsResult,
    CreateDnsRecordRequest,
    DnsRecord,
    DnsRecordType,
    DnsScanReviewRequest,
    DnsScanReviewResult,
    ListDnsRecordsFilters,
    PatchDnsRecordRequest,
    UpdateDnsRecordRequest,
)

RECORDS = "zones/{zone_id}/dns_records"
RECORD = "zones/{zone_id}/dns_records/{record_id}"


class DnsApi(ApiResource):
    """Create, read, update and delete DNS records, plus record scanning."""

    async def get_record(self, zone_id: str, record_id: str) -> DnsRecord:
        require_not_blank(zone_id, "zone_id")
        require_not_blank(record_id, "record_id")
        builder = RequestBuilder.for_path("GET", RECORD, zone_id=zone_id, record_id=record_id)
        return await self._execute(builder, DnsRecord)

    async def list_records(
        self,
        zone_id: str,
        filters: Optional[ListDnsRecordsFilters] = None,
        page: Optional[PageRequest] = None,
    ) -> PagePaginatedResult[DnsRecord]:
        """Fetch a single page of records."""
        require_not_blank(zone_id, "zone_id")
        builder = RequestBuilder.for_path("GET", RECORDS, zone_id=zone_id).filters(filters)
        return await self._execute_page(builder, DnsRecord, page)

    def list_all_records(
        self,
        zone_id: str,
        filters: Optional[ListDnsRecordsFilters] = None,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> AsyncIterator[DnsRecord]:
        """Iterate every record in the zone, fetching pages on demand."""
        require_not_blank(zone_id, "zone_id")

        async def fetch(page: PageRequest) -> PagePaginatedResult[DnsRecord]:
            return await self.list_records(zone_id, filters, page)

        return paginate(fetch, PagePagination(per_page=per_page))

    async def find_record_by_name(
        self,
        zone_id: str,
        hostname: str,
        record_type: Optional[DnsRecordType] = None,
    ) -> Optional[DnsRecord]:
        """First record matching ``hostname`` (and ``record_type``), or None."""
        require_not_blank(zone_id, "zone_id")
        require_not_blank(hostname, "hostname")
        result = await self.list_records(zone_id, ListDnsRecordsFilters(name=hostname, type=record_type))
        return result.items[0] if result.items else None

    async def create_record(self, zone_id: str, request: CreateDnsRecordRequest) -> DnsRecord:
        require_not_blank(zone_id, "zone_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("POST", RECORDS, zone_id=zone_id).json(request)
        return await self._execute(builder, DnsRecord)

    async def create_cname_record(
        self,
        zone_id: str,
        name: str,
        target: str,
        proxied: bool = False,
        ttl: int = 1,
    ) -> DnsRecord:
        require_not_blank(name, "name")
        require_not_blank(target, "target")
        request = CreateDnsRecordRequest(
            type=DnsRecordType.CNAME, name=name, content=target, ttl=ttl, proxied=proxied
        )
        return await self.create_record(zone_id, request)

    async def update_record(self, zone_id: str, record_id: str, request: UpdateDnsRecordRequest) -> DnsRecord:
        """Replace a record (PUT)."""
        require_not_blank(zone_id, "zone_id")
        require_not_blank(record_id, "record_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("PUT", RECORD, zone_id=zone_id, record_id=record_id).json(request)
        return await self._execute(builder, DnsRecord)

    async def patch_record(self, zone_id: str, record_id: str, request: PatchDnsRecordRequest) -> DnsRecord:
        """Change only the fields set on ``request`` (PATCH)."""
        require_not_blank(zone_id, "zone_id")
        require_not_blank(record_id, "record_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("PATCH", RECORD, zone_id=zone_id, record_id=record_id).json(request)
        return await self._execute(builder, DnsRecord)

    async def delete_record(self, zone_id: str, record_id: str) -> None:
        require_not_blank(zone_id, "zone_id")
        require_not_blank(record_id, "record_id")
        await self._execute_void(RequestBuilder.for_path("DELETE", RECORD, zone_id=zone_id, record_id=record_id))

    async def batch_records(self, zone_id: str, request: BatchDnsRecordsRequest) -> BatchDnsRecordsResult:
        """Apply deletes, patches, puts and posts in one call, in that order."""
        require_not_blank(zone_id, "zone_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("POST", RECORDS + "/batch", zone_id=zone_id).json(request)
        return await self._execute(builder, BatchDnsRecordsResult)

    # Scanning

    async def trigger_scan(self, zone_id: str) -> None:
        require_not_blank(zone_id, "zone_id")
        await self._execute_void(RequestBuilder.for_path("POST", RECORDS + "/scan/trigger", zone_id=zone_id))

    async def get_scan_review(self, zone_id: str) -> List[DnsRecord]:
        """Records discovered by the last scan, awaiting review."""
        require_not_blank(zone_id, "zone_id")
        builder = RequestBuilder.for_path("GET", RECORDS + "/scan/review", zone_id=zone_id)
        return await self._execute(builder, List[DnsRecord])

    async def submit_scan_review(self, zone_id: str, request: DnsScanReviewRequest) -> DnsScanReviewResult:
        require_not_blank(zone_id, "zone_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("POST", RECORDS + "/scan/review", zone_id=zone_id).json(request)
        return await self._execute(builder, DnsScanReviewResult)
