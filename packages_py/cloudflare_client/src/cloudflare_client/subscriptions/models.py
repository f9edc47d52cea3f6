"""
Subscription and rate plan models.
"""
from decimal import Decimal
from typing import List, Optional

from ..core.json_types import Timestamp
from ..core.models import CloudflareModel
from ..core.open_enum import OpenEnum


class SubscriptionFrequency(OpenEnum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class SubscriptionState(OpenEnum):
    TRIAL = "Trial"
    PROVISIONED = "Provisioned"
    PAID = "Paid"
    AWAITING_PAYMENT = "AwaitingPayment"
    CANCELLED = "Cancelled"
    FAILED = "Failed"
    EXPIRED = "Expired"


class RatePlan(CloudflareModel):
    id: str
    public_name: str = ""
    currency: str = ""
    scope: Optional[str] = None
    externally_managed: bool = False


class SubscriptionComponent(CloudflareModel):
    name: str
    value: int = 0
    default: Optional[int] = None
    price: Optional[Decimal] = None


class Subscription(CloudflareModel):
    id: str
    state: SubscriptionState
    price: Decimal = Decimal(0)
    currency: str = ""
    frequency: SubscriptionFrequency
    rate_plan: Optional[RatePlan] = None
    current_period_start: Optional[Timestamp] = None
    current_period_end: Optional[Timestamp] = None
    component_values: Optional[List[SubscriptionComponent]] = None


class RatePlanReference(CloudflareModel):
    id: str


class SubscriptionComponentValue(CloudflareModel):
    name: str
    value: int


class CreateSubscriptionRequest(CloudflareModel):
    rate_plan: RatePlanReference
    frequency: Optional[SubscriptionFrequency] = None
    component_values: Optional[List[SubscriptionComponentValue]] = None


class UpdateSubscriptionRequest(CloudflareModel):
    rate_plan: Optional[RatePlanReference] = None
    frequency: Optional[SubscriptionFrequency] = None
    component_values: Optional[List[SubscriptionComponentValue]] = None


class DeleteUserSubscriptionResult(CloudflareModel):
    subscription_id: str


class RatePlanComponent(CloudflareModel):
    name: str
    default: int = 0
    unit_price: Decimal = Decimal(0)


class ZoneRatePlan(CloudflareModel):
    id: str
    name: str = ""
    currency: str = ""
    duration: int = 0
    frequency: SubscriptionFrequency
    components: Optional[List[RatePlanComponent]] = None
