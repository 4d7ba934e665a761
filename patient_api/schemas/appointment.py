from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AppointmentStatus(str, Enum):
    scheduled = "scheduled"
    pending = "pending"
    cancelled = "cancelled"


class AppointmentStats(BaseModel):
    total_count: int = Field(alias="totalCount")
    scheduled_count: int = Field(alias="scheduledCount")
    pending_count: int = Field(alias="pendingCount")
    cancelled_count: int = Field(alias="cancelledCount")
    documents: list[dict[str, Any]]
    model_config = ConfigDict(populate_by_name=True)
