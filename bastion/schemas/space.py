"""Space schema module."""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class SpaceRef(BaseModel):
    """Reference from a leaf resource to the space that owns it.

    Historical records (events) keep their reference after the space is
    destroyed; the reference then becomes a placeholder with ``is_deleted`` set
    and ``organization_id`` possibly cleared.
    """

    id: UUID
    organization_id: Optional[UUID] = None
    is_deleted: bool = False

    model_config = ConfigDict(from_attributes=True, frozen=True)


class Space(BaseModel):
    """Schema for a Space."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    organization_id: Optional[UUID] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def to_ref(self) -> SpaceRef:
        """Build a reference to this space."""
        return SpaceRef(id=self.id, organization_id=self.organization_id)
