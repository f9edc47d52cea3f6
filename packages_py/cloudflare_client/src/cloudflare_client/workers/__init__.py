"""
Workers routes.
"""
from .api import WorkersApi
from .models import (
    WorkerRoute,
    CreateWorkerRouteRequest,
    UpdateWorkerRouteRequest,
)

__all__ = [
    "WorkersApi",
    "WorkerRoute",
    "CreateWorkerRouteRequest",
    "UpdateWorkerRouteRequest",
]
