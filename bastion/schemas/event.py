"""Event schema module."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from bastion.schemas.space import SpaceRef


class Event(BaseModel):
    """Schema for an audit Event.

    Events outlive the space they were recorded in.
    """

    id: UUID = Field(default_factory=uuid4)
    type: str
    actor: Optional[str] = None
    space: Optional[SpaceRef] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(from_attributes=True, frozen=True)
