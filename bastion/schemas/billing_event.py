"""Billing event schema module."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class BillingEvent(BaseModel):
    """Schema for a recorded billing event."""

    id: UUID = Field(default_factory=uuid4)
    event_type: str
    organization_id: Optional[UUID] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(from_attributes=True, frozen=True)
