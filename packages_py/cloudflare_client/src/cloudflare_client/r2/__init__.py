"""
R2 bucket administration.
"""
from .api import R2BucketsApi
from .models import (
    R2Jurisdiction,
    R2LocationHint,
    R2StorageClass,
    R2Bucket,
    CreateBucketRequest,
    ListR2BucketsFilters,
    CorsAllowed,
    CorsRule,
    BucketCorsPolicy,
    LifecycleConditionType,
    LifecycleCondition,
    LifecycleRuleConditions,
    DeleteObjectsTransition,
    AbortMultipartUploadsTransition,
    StorageClassTransition,
    LifecycleRule,
    BucketLifecyclePolicy,
    BucketLockConditionType,
    BucketLockCondition,
    BucketLockRule,
    BucketLockPolicy,
    SippyProvider,
    SippySource,
    SippyDestination,
    SippySourceInfo,
    SippyConfig,
    EnableSippyRequest,
)

__all__ = [
    "R2BucketsApi",
    "R2Jurisdiction",
    "R2LocationHint",
    "R2StorageClass",
    "R2Bucket",
    "CreateBucketRequest",
    "ListR2BucketsFilters",
    "CorsAllowed",
    "CorsRule",
    "BucketCorsPolicy",
    "LifecycleConditionType",
    "LifecycleCondition",
    "LifecycleRuleConditions",
    "DeleteObjectsTransition",
    "AbortMultipartUploadsTransition",
    "StorageClassTransition",
    "LifecycleRule",
    "BucketLifecyclePolicy",
    "BucketLockConditionType",
    "BucketLockCondition",
    "BucketLockRule",
    "BucketLockPolicy",
    "SippyProvider",
    "SippySource",
    "SippyDestination",
    "SippySourceInfo",
    "SippyConfig",
    "EnableSippyRequest",
]
