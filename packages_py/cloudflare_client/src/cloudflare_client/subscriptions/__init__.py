"""
Account, user and zone subscriptions.
"""
from .api import SubscriptionsApi
from .models import (
    SubscriptionFrequency,
    SubscriptionState,
    RatePlan,
    SubscriptionComponent,
    Subscription,
    RatePlanReference,
    SubscriptionComponentValue,
    CreateSubscriptionRequest,
    UpdateSubscriptionRequest,
    DeleteUserSubscriptionResult,
    RatePlanComponent,
    ZoneRatePlan,
)

__all__ = [
    "SubscriptionsApi",
    "SubscriptionFrequency",
    "SubscriptionState",
    "RatePlan",
    "SubscriptionComponent",
    "Subscription",
    "RatePlanReference",
    "SubscriptionComponentValue",
    "CreateSubscriptionRequest",
    "UpdateSubscriptionRequest",
    "DeleteUserSubscriptionResult",
    "RatePlanComponent",
    "ZoneRatePlan",
]
