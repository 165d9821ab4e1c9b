"""App schema module."""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from bastion.schemas.space import SpaceRef


class App(BaseModel):
    """Schema for an App."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    space: Optional[SpaceRef] = None
    memory: int = Field(256, ge=0, description="Memory per instance in MB")
    instances: int = Field(1, ge=0)
    state: str = "STOPPED"

    model_config = ConfigDict(from_attributes=True, frozen=True)
