"""
Subscriptions API for accounts, the current user and zones.
"""
from typing import List

from ..core.request import RequestBuilder
from ..core.validation import require_not_blank, require_not_none
from ..resources import ApiResource
from .models import (
    CreateSubscriptionRequest,
    DeleteUserSubscriptionResult,
    Subscription,
    UpdateSubscriptionRequest,
    ZoneRatePlan,
)

ACCOUNT_SUBSCRIPTIONS = "accounts/{account_id}/subscriptions"
ACCOUNT_SUBSCRIPTION = "accounts/{account_id}/subscriptions/{subscription_id}"
USER_SUBSCRIPTIONS = "user/subscriptions"
USER_SUBSCRIPTION = "user/subscriptions/{subscription_id}"
ZONE_SUBSCRIPTION = "zones/{zone_id}/subscription"
ZONE_RATE_PLANS = "zones/{zone_id}/available_rate_plans"


class SubscriptionsApi(ApiResource):

    # Account

    async def list_account_subscriptions(self, account_id: str) -> List[Subscription]:
        require_not_blank(account_id, "account_id")
        builder = RequestBuilder.for_path("GET", ACCOUNT_SUBSCRIPTIONS, account_id=account_id)
        return await self._execute(builder, List[Subscription])

    async def create_account_subscription(
        self, account_id: str, request: CreateSubscriptionRequest
    ) -> Subscription:
        require_not_blank(account_id, "account_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("POST", ACCOUNT_SUBSCRIPTIONS, account_id=account_id).json(request)
        return await self._execute(builder, Subscription)

    async def update_account_subscription(
        self, account_id: str, subscription_id: str, request: UpdateSubscriptionRequest
    ) -> Subscription:
        require_not_blank(account_id, "account_id")
        require_not_blank(subscription_id, "subscription_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path(
            "PUT", ACCOUNT_SUBSCRIPTION, account_id=account_id, subscription_id=subscription_id
        ).json(request)
        return await self._execute(builder, Subscription)

    async def delete_account_subscription(self, account_id: str, subscription_id: str) -> None:
        require_not_blank(account_id, "account_id")
        require_not_blank(subscription_id, "subscription_id")
        await self._execute_void(RequestBuilder.for_path(
            "DELETE", ACCOUNT_SUBSCRIPTION, account_id=account_id, subscription_id=subscription_id
        ))

    # User

    async def list_user_subscriptions(self) -> List[Subscription]:
        return await self._execute(RequestBuilder(USER_SUBSCRIPTIONS), List[Subscription])

    async def update_user_subscription(
        self, subscription_id: str, request: UpdateSubscriptionRequest
    ) -> Subscription:
        require_not_blank(subscription_id, "subscription_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("PUT", USER_SUBSCRIPTION, subscription_id=subscription_id).json(request)
        return await self._execute(builder, Subscription)

    async def delete_user_subscription(self, subscription_id: str) -> DeleteUserSubscriptionResult:
        require_not_blank(subscription_id, "subscription_id")
        builder = RequestBuilder.for_path("DELETE", USER_SUBSCRIPTION, subscription_id=subscription_id)
        return await self._execute(builder, DeleteUserSubscriptionResult)

    # Zone

    async def get_zone_subscription(self, zone_id: str) -> Subscription:
        require_not_blank(zone_id, "zone_id")
        return await self._execute(RequestBuilder.for_path("GET", ZONE_SUBSCRIPTION, zone_id=zone_id), Subscription)

    async def create_zone_subscription(self, zone_id: str, request: CreateSubscriptionRequest) -> Subscription:
        require_not_blank(zone_id, "zone_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("POST", ZONE_SUBSCRIPTION, zone_id=zone_id).json(request)
        return await self._execute(builder, Subscription)

    async def update_zone_subscription(self, zone_id: str, request: UpdateSubscriptionRequest) -> Subscription:
        require_not_blank(zone_id, "zone_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("PUT", ZONE_SUBSCRIPTION, zone_id=zone_id).json(request)
        return await self._execute(builder, Subscription)

    async def list_available_rate_plans(self, zone_id: str) -> List[ZoneRatePlan]:
        require_not_blank(zone_id, "zone_id")
        builder = RequestBuilder.for_path("GET", ZONE_RATE_PLANS, zone_id=zone_id)
        return await self._execute(builder, List[ZoneRatePlan])
