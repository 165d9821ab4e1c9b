"""Domain schema module."""

from typing import Literal, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from bastion.schemas.organization import OrganizationRef


class Domain(BaseModel):
    """Schema for a Domain.

    ``is_shared`` is an explicit discriminator: a private domain whose owning
    organization is gone stays private.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    is_shared: bool
    owning_organization: Optional[OrganizationRef] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)


class PrivateDomain(Domain):
    """Domain owned by a single organization."""

    is_shared: Literal[False] = False


class SharedDomain(Domain):
    """System-managed domain usable by every organization."""

    is_shared: Literal[True] = True
    owning_organization: None = None
