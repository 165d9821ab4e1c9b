"""Task schema module."""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from bastion.schemas.app import App


class Task(BaseModel):
    """Schema for a Task run on behalf of an app."""

    id: UUID = Field(default_factory=uuid4)
    app: Optional[App] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)
