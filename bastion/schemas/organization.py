"""Organization schema module."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

UNLIMITED = -1


class QuotaDefinition(BaseModel):
    """Quota limits applied to an organization.

    ``total_routes`` of ``-1`` means unlimited.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    total_routes: int = Field(..., ge=UNLIMITED, description="Max routes, -1 for unlimited")
    memory_limit: int = Field(..., ge=0, description="Memory limit in MB")

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def unlimited_routes(self) -> bool:
        """Whether the route quota is the unlimited sentinel."""
        return self.total_routes == UNLIMITED


class OrganizationRef(BaseModel):
    """Reference from a resource to its owning organization.

    A reference to a destroyed organization is kept as a placeholder with
    ``is_deleted`` set.
    """

    id: UUID
    is_deleted: bool = False

    model_config = ConfigDict(from_attributes=True, frozen=True)


class Organization(BaseModel):
    """Schema for an Organization."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    status: str = "active"
    billing_enabled: bool = False
    quota_definition: QuotaDefinition

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def to_ref(self) -> OrganizationRef:
        """Build a reference to this organization."""
        return OrganizationRef(id=self.id)
