"""
Workers route models.
"""
from typing import Optional

from ..core.models import CloudflareModel


class WorkerRoute(CloudflareModel):
    id: str
    pattern: str
    script: Optional[str] = None


class CreateWorkerRouteRequest(CloudflareModel):
    pattern: str
    script: Optional[str] = None


class UpdateWorkerRouteRequest(CreateWorkerRouteRequest):
    pass
