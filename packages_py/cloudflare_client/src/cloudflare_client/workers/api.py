"""
Workers routes API (``zones/{zone_id}/workers/routes``).
"""
from typing import List

from ..core.request import RequestBuilder
from ..core.validation import require_not_blank, require_not_none
from ..resources import ApiResource
from .models import CreateWorkerRouteRequest, UpdateWorkerRouteRequest, WorkerRoute

ROUTES = "zones/{zone_id}/workers/routes"
ROUTE = "zones/{zone_id}/workers/routes/{route_id}"


class WorkersApi(ApiResource):

    async def list_routes(self, zone_id: str) -> List[WorkerRoute]:
        """All routes in the zone. The endpoint is not paginated."""
        require_not_blank(zone_id, "zone_id")
        return await self._execute(RequestBuilder.for_path("GET", ROUTES, zone_id=zone_id), List[WorkerRoute])

    async def get_route(self, zone_id: str, route_id: str) -> WorkerRoute:
        require_not_blank(zone_id, "zone_id")
        require_not_blank(route_id, "route_id")
        builder = RequestBuilder.for_path("GET", ROUTE, zone_id=zone_id, route_id=route_id)
        return await self._execute(builder, WorkerRoute)

    async def create_route(self, zone_id: str, request: CreateWorkerRouteRequest) -> WorkerRoute:
        require_not_blank(zone_id, "zone_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("POST", ROUTES, zone_id=zone_id).json(request)
        return await self._execute(builder, WorkerRoute)

    async def update_route(self, zone_id: str, route_id: str, request: UpdateWorkerRouteRequest) -> WorkerRoute:
        require_not_blank(zone_id, "zone_id")
        require_not_blank(route_id, "route_id")
        require_not_none(request, "request")
        builder = RequestBuilder.for_path("PUT", ROUTE, zone_id=zone_id, route_id=route_id).json(request)
        return await self._execute(builder, WorkerRoute)

    async def delete_route(self, zone_id: str, route_id: str) -> None:
        require_not_blank(zone_id, "zone_id")
        require_not_blank(route_id, "route_id")
        await self._execute_void(RequestBuilder.for_path("DELETE", ROUTE, zone_id=zone_id, route_id=route_id))
