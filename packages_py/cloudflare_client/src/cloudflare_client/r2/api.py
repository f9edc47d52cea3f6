"""
R2 bucket administration API (``accounts/{account_id}/r2/buckets``).

Every operation accepts an optional jurisdiction, sent as the
``cf-r2-jurisdiction`` header only when given.
"""
import logging
from typing import Any, AsyncIterator, Optional

from ..core.base_client import BaseClient
from ..core.pagination import (
    DEFAULT_PER_PAGE,
    CursorPaginatedResult,
    CursorPagination,
    CursorRequest,
    paginate,
)
from ..core.request import RequestBuilder
from ..core.validation import require_not_blank, require_not_none
from ..resources import ApiResource
from .models import (
    BucketCorsPolicy,
    BucketLifecyclePolicy,
    BucketLockPolicy,
    CreateBucketRequest,
    EnableSippyRequest,
    LifecycleRuleConditions,
    ListR2BucketsFilters,
    R2Bucket,
    R2Jurisdiction,
    R2LocationHint,
    R2StorageClass,
    SippyConfig,
)

logger = logging.getLogger(__name__)

LOG_PREFIX = "[R2Buckets]"

JURISDICTION_HEADER = "cf-r2-jurisdiction"
STORAGE_CLASS_HEADER = "cf-r2-storage-class"

BUCKETS = "accounts/{account_id}/r2/buckets"
BUCKET = "accounts/{account_id}/r2/buckets/{bucket_name}"


class R2BucketsApi(ApiResource):
    """
    Bucket administration for one account.

    ``account_id`` defaults to the one in the client configuration.
    """

    def __init__(self, transport: BaseClient, account_id: Optional[str] = None):
        super().__init__(transport)
        self._account_id = account_id if account_id is not None else transport.config.account_id

    @property
    def account_id(self) -> str:
        return require_not_blank(self._account_id, "account_id")

    def _request(
        self,
        method: str,
        template: str,
        jurisdiction: Optional[R2Jurisdiction],
        **segments: Any,
    ) -> RequestBuilder:
        return (
            RequestBuilder.for_path(method, template, account_id=self.account_id, **segments)
            .header(JURISDICTION_HEADER, jurisdiction)
        )

    def _bucket(self, method: str, bucket_name: str, jurisdiction: Optional[R2Jurisdiction], suffix: str = "") -> RequestBuilder:
        require_not_blank(bucket_name, "bucket_name")
        return self._request(method, BUCKET + suffix, jurisdiction, bucket_name=bucket_name)

    # Buckets

    async def create_bucket(
        self,
        bucket_name: str,
        location_hint: Optional[R2LocationHint] = None,
        jurisdiction: Optional[R2Jurisdiction] = None,
        storage_class: Optional[R2StorageClass] = None,
    ) -> R2Bucket:
        require_not_blank(bucket_name, "bucket_name")
        body = CreateBucketRequest(name=bucket_name, location_hint=location_hint, storage_class=storage_class)
        builder = self._request("POST", BUCKETS, jurisdiction).json(body)
        return await self._execute(builder, R2Bucket)

    async def get_bucket(self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None) -> R2Bucket:
        return await self._execute(self._bucket("GET", bucket_name, jurisdiction), R2Bucket)

    async def list_buckets(
        self,
        filters: Optional[ListR2BucketsFilters] = None,
        jurisdiction: Optional[R2Jurisdiction] = None,
        page: Optional[CursorRequest] = None,
    ) -> CursorPaginatedResult[R2Bucket]:
        """One page of buckets. Items arrive under ``result.buckets``."""
        builder = self._request("GET", BUCKETS, jurisdiction).filters(filters)
        return await self._execute_cursor(builder, R2Bucket, page, items_key="buckets")

    def list_all_buckets(
        self,
        filters: Optional[ListR2BucketsFilters] = None,
        jurisdiction: Optional[R2Jurisdiction] = None,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> AsyncIterator[R2Bucket]:

        async def fetch(request: CursorRequest) -> CursorPaginatedResult[R2Bucket]:
            return await self.list_buckets(filters, jurisdiction, request)

        return paginate(fetch, CursorPagination(per_page=per_page))

    async def delete_bucket(self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None) -> None:
        await self._execute_void(self._bucket("DELETE", bucket_name, jurisdiction))

    async def update_bucket(
        self,
        bucket_name: str,
        storage_class: R2StorageClass,
        jurisdiction: Optional[R2Jurisdiction] = None,
    ) -> R2Bucket:
        """Change the default storage class. The class travels in a header; the body is empty."""
        require_not_none(storage_class, "storage_class")
        builder = (
            self._bucket("PATCH", bucket_name, jurisdiction)
            .header(STORAGE_CLASS_HEADER, storage_class)
            .json({})
        )
        return await self._execute(builder, R2Bucket)

    # CORS

    async def get_cors(self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None) -> BucketCorsPolicy:
        return await self._execute(self._bucket("GET", bucket_name, jurisdiction, "/cors"), BucketCorsPolicy)

    async def set_cors(
        self,
        bucket_name: str,
        policy: BucketCorsPolicy,
        jurisdiction: Optional[R2Jurisdiction] = None,
    ) -> None:
        require_not_none(policy, "policy")
        await self._execute_void(self._bucket("PUT", bucket_name, jurisdiction, "/cors").json(policy))

    async def delete_cors(self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None) -> None:
        await self._execute_void(self._bucket("DELETE", bucket_name, jurisdiction, "/cors"))

    # Lifecycle

    async def get_lifecycle(
        self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None
    ) -> BucketLifecyclePolicy:
        return await self._execute(
            self._bucket("GET", bucket_name, jurisdiction, "/lifecycle"), BucketLifecyclePolicy
        )

    async def set_lifecycle(
        self,
        bucket_name: str,
        policy: BucketLifecyclePolicy,
        jurisdiction: Optional[R2Jurisdiction] = None,
    ) -> None:
        """Replace the lifecycle rules. Rules without conditions are sent with ``{}``."""
        require_not_none(policy, "policy")
        # The API rejects rules whose "conditions" key is missing (error 10040)
        rules = [
            rule if rule.conditions is not None else rule.model_copy(update={"conditions": LifecycleRuleConditions()})
            for rule in policy.rules
        ]
        body = BucketLifecyclePolicy(rules=rules)
        await self._execute_void(self._bucket("PUT", bucket_name, jurisdiction, "/lifecycle").json(body))

    async def delete_lifecycle(self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None) -> None:
        """There is no DELETE endpoint; an empty rule set removes the policy."""
        await self.set_lifecycle(bucket_name, BucketLifecyclePolicy(rules=[]), jurisdiction)

    # Lock

    async def get_lock(self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None) -> BucketLockPolicy:
        return await self._execute(self._bucket("GET", bucket_name, jurisdiction, "/lock"), BucketLockPolicy)

    async def set_lock(
        self,
        bucket_name: str,
        policy: BucketLockPolicy,
        jurisdiction: Optional[R2Jurisdiction] = None,
    ) -> BucketLockPolicy:
        require_not_none(policy, "policy")
        builder = self._bucket("PUT", bucket_name, jurisdiction, "/lock").json(policy)
        return await self._execute(builder, BucketLockPolicy)

    async def delete_lock(self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None) -> None:
        """Remove every lock rule by writing an empty rule set."""
        await self.set_lock(bucket_name, BucketLockPolicy(rules=[]), jurisdiction)

    # Sippy

    async def get_sippy(self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None) -> SippyConfig:
        return await self._execute(self._bucket("GET", bucket_name, jurisdiction, "/sippy"), SippyConfig)

    async def enable_sippy(
        self,
        bucket_name: str,
        request: EnableSippyRequest,
        jurisdiction: Optional[R2Jurisdiction] = None,
    ) -> SippyConfig:
        require_not_none(request, "request")
        logger.debug(f"{LOG_PREFIX} Enabling sippy on {bucket_name} from {request.source.provider.value}")
        builder = self._bucket("PUT", bucket_name, jurisdiction, "/sippy").json(request)
        return await self._execute(builder, SippyConfig)

    async def disable_sippy(self, bucket_name: str, jurisdiction: Optional[R2Jurisdiction] = None) -> None:
        await self._execute_void(self._bucket("DELETE", bucket_name, jurisdiction, "/sippy"))
