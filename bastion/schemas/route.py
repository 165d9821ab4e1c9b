"""Route schema module."""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from bastion.schemas.domain import Domain
from bastion.schemas.space import SpaceRef


class Route(BaseModel):
    """Schema for a Route (host on a domain, owned by a space)."""

    id: UUID = Field(default_factory=uuid4)
    host: str
    domain: Optional[Domain] = None
    space: Optional[SpaceRef] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def fqdn(self) -> str:
        """Fully qualified domain name of the route."""
        if self.domain is None:
            return self.host
        if not self.host:
            return self.domain.name
        return f"{self.host}.{self.domain.name}"
