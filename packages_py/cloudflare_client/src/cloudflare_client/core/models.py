"""
Base model and enums shared across resource packages.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class CloudflareModel(BaseModel):
    """Response/request model. Unknown response fields are ignored."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class FilterModel(BaseModel):
    """Query filter model. Has no wire form until passed through QueryBuilder."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ListOrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
