"""
R2 bucket administration models.

Bucket CRUD uses the usual snake_case fields. CORS, lifecycle, lock and sippy
payloads are camelCase on the wire, so those models carry a camel alias
generator.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.json_types import Timestamp
from ..core.models import CloudflareModel, FilterModel, ListOrderDirection
from ..core.open_enum import OpenEnum

SECONDS_PER_DAY = 86400


class R2Jurisdiction(OpenEnum):
    DEFAULT = "default"
    EUROPEAN_UNION = "eu"
    FEDRAMP = "fedramp"


class R2LocationHint(OpenEnum):
    WEST_NORTH_AMERICA = "wnam"
    EAST_NORTH_AMERICA = "enam"
    WEST_EUROPE = "weur"
    EAST_EUROPE = "eeur"
    ASIA_PACIFIC = "apac"
    OCEANIA = "oc"


class R2StorageClass(OpenEnum):
    STANDARD = "Standard"
    INFREQUENT_ACCESS = "InfrequentAccess"


class CamelModel(CloudflareModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)


# Buckets

class R2Bucket(CloudflareModel):
    name: str
    creation_date: Optional[Timestamp] = None
    location: Optional[str] = None
    jurisdiction: Optional[str] = None
    storage_class: Optional[str] = None


class CreateBucketRequest(CamelModel):
    name: str
    location_hint: Optional[R2LocationHint] = None
    storage_class: Optional[R2StorageClass] = None


class ListR2BucketsFilters(FilterModel):
    name_contains: Optional[str] = None
    order: Optional[str] = None
    direction: Optional[ListOrderDirection] = None
    start_after: Optional[str] = None


# CORS

class CorsAllowed(CamelModel):
    methods: List[str]
    origins: List[str]
    headers: Optional[List[str]] = None


class CorsRule(CamelModel):
    allowed: CorsAllowed
    id: Optional[str] = None
    expose_headers: Optional[List[str]] = None
    max_age_seconds: Optional[int] = None


class BucketCorsPolicy(CamelModel):
    rules: List[CorsRule] = []


# Lifecycle

class LifecycleConditionType(str, Enum):
    AGE = "Age"
    DATE = "Date"


class LifecycleCondition(CamelModel):
    type: LifecycleConditionType
    max_age: Optional[int] = None
    date: Optional[Timestamp] = None

    @classmethod
    def after_days(cls, days: int) -> "LifecycleCondition":
        return cls(type=LifecycleConditionType.AGE, max_age=days * SECONDS_PER_DAY)

    @classmethod
    def on_date(cls, date: datetime) -> "LifecycleCondition":
        return cls(type=LifecycleConditionType.DATE, date=date)


class LifecycleRuleConditions(CamelModel):
    prefix: Optional[str] = None


class DeleteObjectsTransition(CamelModel):
    condition: LifecycleCondition


class AbortMultipartUploadsTransition(CamelModel):
    condition: LifecycleCondition


class StorageClassTransition(CamelModel):
    condition: LifecycleCondition
    storage_class: R2StorageClass


class LifecycleRule(CamelModel):
    id: str
    enabled: bool = True
    conditions: Optional[LifecycleRuleConditions] = None
    delete_objects_transition: Optional[DeleteObjectsTransition] = None
    abort_multipart_uploads_transition: Optional[AbortMultipartUploadsTransition] = None
    storage_class_transitions: Optional[List[StorageClassTransition]] = None


class BucketLifecyclePolicy(CamelModel):
    rules: List[LifecycleRule] = []


# Lock

class BucketLockConditionType(str, Enum):
    AGE = "Age"
    DATE = "Date"
    INDEFINITE = "Indefinite"


class BucketLockCondition(CamelModel):
    type: BucketLockConditionType
    max_age_seconds: Optional[int] = None
    date: Optional[Timestamp] = None

    @classmethod
    def for_days(cls, days: int) -> "BucketLockCondition":
        return cls(type=BucketLockConditionType.AGE, max_age_seconds=days * SECONDS_PER_DAY)

    @classmethod
    def for_seconds(cls, seconds: int) -> "BucketLockCondition":
        return cls(type=BucketLockConditionType.AGE, max_age_seconds=seconds)

    @classmethod
    def until_date(cls, date: datetime) -> "BucketLockCondition":
        return cls(type=BucketLockConditionType.DATE, date=date)

    @classmethod
    def indefinitely(cls) -> "BucketLockCondition":
        return cls(type=BucketLockConditionType.INDEFINITE)


class BucketLockRule(CamelModel):
    id: Optional[str] = None
    enabled: bool = True
    prefix: Optional[str] = None
    condition: Optional[BucketLockCondition] = None


class BucketLockPolicy(CamelModel):
    rules: List[BucketLockRule] = []


# Sippy (incremental migration from another provider)

class SippyProvider(str, Enum):
    AWS = "aws"
    GCS = "gcs"
    R2 = "r2"


class SippySource(CamelModel):
    provider: SippyProvider
    bucket: str
    region: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    client_email: Optional[str] = None
    private_key: Optional[str] = None

    @classmethod
    def aws(cls, bucket: str, region: str, access_key_id: str, secret_access_key: str) -> "SippySource":
        return cls(
            provider=SippyProvider.AWS,
            bucket=bucket,
            region=region,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
        )

    @classmethod
    def gcs(cls, bucket: str, client_email: str, private_key: str) -> "SippySource":
        return cls(provider=SippyProvider.GCS, bucket=bucket, client_email=client_email, private_key=private_key)


class SippyDestination(CamelModel):
    provider: SippyProvider = SippyProvider.R2
    bucket: Optional[str] = None
    account: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None


class SippySourceInfo(CamelModel):
    provider: Optional[SippyProvider] = None
    bucket: Optional[str] = None
    bucket_url: Optional[str] = None
    region: Optional[str] = None


class SippyConfig(CamelModel):
    enabled: bool = False
    source: Optional[SippySourceInfo] = None
    destination: Optional[SippyDestination] = None


class EnableSippyRequest(CamelModel):
    source: SippySource
    destination: Optional[SippyDestination] = None
